""" Data models for workflow definitions, visual graphs and derived results """

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import DefinitionError


class NodeType(str, Enum):
    START = "start"
    END = "end"
    TASK = "task"
    APPROVAL = "approval"
    CONDITION = "condition"
    AI_AGENT = "ai_agent"
    HUMAN_TASK = "human_task"
    API_CALL = "api_call"
    WEBHOOK = "webhook"


class VariableType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class NodeData:
    label: str = ""
    config: Dict[str, Any] = field(default_factory=dict, hash=False)
    inputs: Dict[str, Any] = field(default_factory=dict, hash=False)
    outputs: Dict[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class WorkflowNode:
    id: str
    type: NodeType
    position: Position = field(default_factory=Position)
    data: NodeData = field(default_factory=NodeData)

    def __post_init__(self):
        try:
            object.__setattr__(self, "type", NodeType(self.type))
        except ValueError:
            raise DefinitionError(f"Unknown node type for node {self.id}: {self.type!r}")

    @property
    def label(self) -> str:
        return self.data.label


@dataclass(frozen=True)
class WorkflowEdge:
    id: str
    source: str
    target: str
    type: str = "default"
    conditions: Dict[str, Any] = field(default_factory=dict, hash=False) # only "expression" today
    label: Optional[str] = None

    @property
    def expression(self) -> Optional[str]:
        return self.conditions.get("expression")


@dataclass(frozen=True)
class Variable:
    type: VariableType = VariableType.STRING
    default: Any = field(default=None, hash=False)
    required: bool = False
    description: str = ""

    def __post_init__(self):
        try:
            object.__setattr__(self, "type", VariableType(self.type))
        except ValueError:
            raise DefinitionError(f"Unknown variable type: {self.type!r}")


@dataclass(frozen=True)
class WorkflowDefinition:
    """
    Canonical workflow graph. Node order is authoring order, not execution order.
    Node ids and edge ids must be unique. Mapping fields (payloads, conditions,
    variables) are compared for equality but left out of the hash.
    """
    nodes: Tuple[WorkflowNode, ...] = ()
    edges: Tuple[WorkflowEdge, ...] = ()
    variables: Dict[str, Variable] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))
        _check_unique("node", [n.id for n in self.nodes])
        _check_unique("edge", [e.id for e in self.edges])

    def get_node(self, node_id: str) -> Optional[WorkflowNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def nodes_of_type(self, node_type: NodeType) -> List[WorkflowNode]:
        return [n for n in self.nodes if n.type == node_type]

    def edges_from(self, node_id: str) -> List[WorkflowEdge]:
        return [e for e in self.edges if e.source == node_id]

    def edges_to(self, node_id: str) -> List[WorkflowEdge]:
        return [e for e in self.edges if e.target == node_id]


def _check_unique(kind: str, ids: List[str]) -> None:
    seen = set()
    for item_id in ids:
        if item_id in seen:
            raise DefinitionError(f"Duplicate {kind} id: {item_id}")
        seen.add(item_id)


# -------------------------
# VISUAL (EDITOR) GRAPH
# -------------------------

@dataclass(frozen=True)
class VisualNodeData:
    label: str = ""
    config: Dict[str, Any] = field(default_factory=dict, hash=False)
    inputs: Dict[str, Any] = field(default_factory=dict, hash=False)
    outputs: Dict[str, Any] = field(default_factory=dict, hash=False)
    description: str = ""


@dataclass(frozen=True)
class VisualNode:
    """ A node as the editor canvas sees it; ``type`` is the presentation tag. """
    id: str
    type: str = "task"
    position: Position = field(default_factory=Position)
    data: VisualNodeData = field(default_factory=VisualNodeData)


@dataclass(frozen=True)
class VisualEdge:
    id: str
    source: str
    target: str
    type: Optional[str] = None
    label: Optional[str] = None
    condition: Optional[str] = None
    animated: bool = False


@dataclass(frozen=True)
class VisualGraph:
    nodes: Tuple[VisualNode, ...] = ()
    edges: Tuple[VisualEdge, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))


# -------------------------
# DERIVED RESULTS
# -------------------------

@dataclass(frozen=True)
class ValidationResult:
    errors: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "errors": list(self.errors)}


@dataclass(frozen=True)
class ExecutionPlan:
    """
    Level-ordered plan. Every node in a group may run concurrently once all
    earlier groups have finished. ``execution_order`` is the flattened groups.
    """
    parallel_groups: Tuple[Tuple[str, ...], ...] = ()
    dependencies: Dict[str, List[str]] = field(default_factory=dict, hash=False)
    execution_order: Tuple[str, ...] = field(init=False)

    def __post_init__(self):
        groups = tuple(tuple(g) for g in self.parallel_groups)
        object.__setattr__(self, "parallel_groups", groups)
        object.__setattr__(self, "execution_order", tuple(n for g in groups for n in g))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "executionOrder": list(self.execution_order),
            "dependencies": {k: list(v) for k, v in self.dependencies.items()},
            "parallelGroups": [list(g) for g in self.parallel_groups],
        }


@dataclass(frozen=True)
class WorkflowMetrics:
    total_nodes: int = 0
    total_edges: int = 0
    complexity: int = 0
    estimated_duration: float = 0 # minutes, rough heuristic
    node_types: Dict[str, int] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalNodes": self.total_nodes,
            "totalEdges": self.total_edges,
            "complexity": self.complexity,
            "estimatedDuration": self.estimated_duration,
            "nodeTypes": dict(self.node_types),
        }
