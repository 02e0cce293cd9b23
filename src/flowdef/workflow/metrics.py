""" Structural metrics for display. The duration is a rough heuristic, not a schedule. """

from typing import Dict, Mapping, Optional

from .models import NodeType, WorkflowDefinition, WorkflowMetrics

# minutes per node
NODE_DURATIONS: Dict[NodeType, float] = {
    NodeType.START: 0,
    NodeType.END: 0,
    NodeType.TASK: 5,
    NodeType.APPROVAL: 60,
    NodeType.CONDITION: 0.1,
    NodeType.AI_AGENT: 2,
    NodeType.HUMAN_TASK: 15,
    NodeType.API_CALL: 1,
    NodeType.WEBHOOK: 0.5,
}

if set(NODE_DURATIONS) != set(NodeType):
    raise RuntimeError("every node type needs a duration")

BRANCHING_TYPES = (NodeType.CONDITION, NodeType.APPROVAL)
DEFAULT_NODE_DURATION = 5
BRANCHING_WEIGHT = 2


def calculate_metrics(
    definition: WorkflowDefinition,
    *,
    durations: Optional[Mapping[NodeType, float]] = None,
    default_duration: float = DEFAULT_NODE_DURATION,
    branching_weight: int = BRANCHING_WEIGHT,
) -> WorkflowMetrics:
    """
    complexity = nodes + edges + branching_weight * (condition + approval nodes)
    estimated_duration = sum of per-type minutes, default_duration for types missing from the table
    """
    table = NODE_DURATIONS if durations is None else durations

    node_types: Dict[str, int] = {}
    for node in definition.nodes:
        node_types[node.type.value] = node_types.get(node.type.value, 0) + 1

    branching = sum(1 for node in definition.nodes if node.type in BRANCHING_TYPES)
    complexity = len(definition.nodes) + len(definition.edges) + branching * branching_weight

    estimated = 0
    for node in definition.nodes:
        estimated += table.get(node.type, default_duration)

    return WorkflowMetrics(
        total_nodes=len(definition.nodes),
        total_edges=len(definition.edges),
        complexity=complexity,
        estimated_duration=estimated,
        node_types=node_types,
    )
