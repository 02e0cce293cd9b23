"""
Graph model mapper: converts between the editor's visual graph and the
canonical WorkflowDefinition.

The two lookup tables are not inverses. Several canonical types collapse into
the generic "task" presentation, so only the canonical side of a round trip is
stable: to_definition(from_definition(to_definition(g))) == to_definition(g).
"""

from logging import getLogger
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from .models import (
    NodeData,
    NodeType,
    Variable,
    VisualEdge,
    VisualGraph,
    VisualNode,
    VisualNodeData,
    WorkflowDefinition,
    WorkflowEdge,
    WorkflowNode,
)

logger = getLogger(__name__)

DEFAULT_NODE_TYPE = NodeType.TASK
DEFAULT_EDGE_TYPE = "default"

# presentation tag -> canonical type
_VISUAL_TO_CANONICAL: Dict[str, NodeType] = {
    "start": NodeType.START,
    "end": NodeType.END,
    "task": NodeType.TASK,
    "approval": NodeType.APPROVAL,
    "conditional": NodeType.CONDITION,
    "condition": NodeType.CONDITION,
    "ai_agent": NodeType.AI_AGENT,
    "ai-agent": NodeType.AI_AGENT,
    "parallel": NodeType.TASK, # parallel is a task with special config
    "form": NodeType.TASK,
}

# canonical type -> presentation tag
_CANONICAL_TO_VISUAL: Dict[NodeType, str] = {
    NodeType.START: "start",
    NodeType.END: "end",
    NodeType.TASK: "task",
    NodeType.APPROVAL: "approval",
    NodeType.CONDITION: "conditional",
    NodeType.AI_AGENT: "ai_agent",
    NodeType.HUMAN_TASK: "task",
    NodeType.API_CALL: "task",
    NodeType.WEBHOOK: "task",
}

if set(_CANONICAL_TO_VISUAL) != set(NodeType):
    raise RuntimeError("every node type needs a visual tag")


def map_visual_type(visual_type: Optional[str]) -> NodeType:
    """ Map a presentation tag to a canonical node type; unknown tags become task. """
    node_type = _VISUAL_TO_CANONICAL.get(visual_type or "")
    if node_type is None:
        logger.debug("Unknown visual node type %r, mapping to %s", visual_type, DEFAULT_NODE_TYPE.value)
        return DEFAULT_NODE_TYPE
    return node_type


def map_canonical_type(node_type: NodeType) -> str:
    return _CANONICAL_TO_VISUAL[NodeType(node_type)]


def to_definition(
    visual_nodes: Union[VisualGraph, Iterable[VisualNode]],
    visual_edges: Optional[Iterable[VisualEdge]] = None,
    variables: Optional[Mapping[str, Variable]] = None,
) -> WorkflowDefinition:
    """
    Build a WorkflowDefinition from editor nodes and edges.
    Accepts either a VisualGraph or the node and edge sequences separately.
    """
    if isinstance(visual_nodes, VisualGraph):
        visual_nodes, visual_edges = visual_nodes.nodes, visual_nodes.edges

    nodes = []
    for vnode in visual_nodes:
        nodes.append(WorkflowNode(
            id=vnode.id,
            type=map_visual_type(vnode.type),
            position=vnode.position,
            data=NodeData(
                label=vnode.data.label or "",
                config=dict(vnode.data.config or {}),
                inputs=dict(vnode.data.inputs or {}),
                outputs=dict(vnode.data.outputs or {}),
            ),
        ))

    edges = []
    for vedge in visual_edges or ():
        edges.append(WorkflowEdge(
            id=vedge.id,
            source=vedge.source,
            target=vedge.target,
            type=vedge.type or DEFAULT_EDGE_TYPE,
            conditions={"expression": vedge.condition} if vedge.condition else {},
            label=vedge.label,
        ))

    return WorkflowDefinition(nodes=nodes, edges=edges, variables=dict(variables or {}))


def from_definition(definition: WorkflowDefinition) -> Tuple[Tuple[VisualNode, ...], Tuple[VisualEdge, ...]]:
    """ Inverse mapping for loading a stored definition back into the editor. Variables are dropped. """
    nodes = tuple(
        VisualNode(
            id=node.id,
            type=map_canonical_type(node.type),
            position=node.position,
            data=VisualNodeData(
                label=node.data.label,
                config=dict(node.data.config),
                inputs=dict(node.data.inputs),
                outputs=dict(node.data.outputs),
            ),
        )
        for node in definition.nodes
    )
    edges = tuple(
        VisualEdge(
            id=edge.id,
            source=edge.source,
            target=edge.target,
            type=edge.type,
            label=edge.label,
            condition=edge.expression,
            animated=False,
        )
        for edge in definition.edges
    )
    return nodes, edges


def from_definition_graph(definition: WorkflowDefinition) -> VisualGraph:
    nodes, edges = from_definition(definition)
    return VisualGraph(nodes=nodes, edges=edges)
