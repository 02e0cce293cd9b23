"""
pydantic models for raw documents: stored workflow definitions and editor
graphs as they arrive from JSON or YAML.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import DefinitionError
from .models import (
    NodeData,
    NodeType,
    Position,
    Variable,
    VariableType,
    VisualEdge,
    VisualGraph,
    VisualNode,
    VisualNodeData,
    WorkflowDefinition,
    WorkflowEdge,
    WorkflowNode,
)


def _scalar_to_str(value: Any) -> Any:
    # YAML turns unquoted labels like 1, 2.5 or true into numbers and booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class PositionSpec(BaseModel):
    x: float = 0.0
    y: float = 0.0


class NodeDataSpec(BaseModel):
    label: str = ""
    config: Dict[str, Any] = Field(default_factory=dict)
    inputs: Dict[str, Any] = Field(default_factory=dict)
    outputs: Dict[str, Any] = Field(default_factory=dict)

    labels_as_text = field_validator("label", mode="before")(_scalar_to_str)


class NodeSpec(BaseModel):
    id: str
    type: NodeType
    position: PositionSpec = Field(default_factory=PositionSpec)
    data: NodeDataSpec = Field(default_factory=NodeDataSpec)


class EdgeSpec(BaseModel):
    id: str
    source: str
    target: str
    type: str = "default"
    conditions: Dict[str, Any] = Field(default_factory=dict)
    label: Optional[str] = None

    labels_as_text = field_validator("label", mode="before")(_scalar_to_str)


class VariableSpec(BaseModel):
    type: VariableType = VariableType.STRING
    default: Any = None
    required: bool = False
    description: str = ""


class DefinitionSpec(BaseModel):
    nodes: List[NodeSpec] = Field(default_factory=list)
    edges: List[EdgeSpec] = Field(default_factory=list)
    variables: Dict[str, VariableSpec] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


# Editor graph documents carry UI-only keys (formId, approvers, ...) that are ignored.

class VisualNodeDataSpec(BaseModel):
    label: str = ""
    config: Optional[Dict[str, Any]] = None
    inputs: Optional[Dict[str, Any]] = None
    outputs: Optional[Dict[str, Any]] = None
    description: str = ""

    labels_as_text = field_validator("label", "description", mode="before")(_scalar_to_str)


class VisualNodeSpec(BaseModel):
    id: str
    type: Optional[str] = None
    position: PositionSpec = Field(default_factory=PositionSpec)
    data: VisualNodeDataSpec = Field(default_factory=VisualNodeDataSpec)


class VisualEdgeDataSpec(BaseModel):
    label: Optional[str] = None
    condition: Optional[str] = None
    animated: bool = False

    labels_as_text = field_validator("label", "condition", mode="before")(_scalar_to_str)


class VisualEdgeSpec(BaseModel):
    id: str
    source: str
    target: str
    type: Optional[str] = None
    data: VisualEdgeDataSpec = Field(default_factory=VisualEdgeDataSpec)


class VisualGraphSpec(BaseModel):
    nodes: List[VisualNodeSpec] = Field(default_factory=list)
    edges: List[VisualEdgeSpec] = Field(default_factory=list)


def _validate(model: type, raw: Any) -> Any:
    if raw is None:
        raw = {}
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise DefinitionError(f"Document validation error: {e}")


def parse_definition(raw: Dict[str, Any]) -> WorkflowDefinition:
    """ Validate a raw definition document and build the immutable WorkflowDefinition. """
    spec = _validate(DefinitionSpec, raw)
    nodes = [
        WorkflowNode(
            id=n.id,
            type=n.type,
            position=Position(n.position.x, n.position.y),
            data=NodeData(
                label=n.data.label,
                config=n.data.config,
                inputs=n.data.inputs,
                outputs=n.data.outputs,
            ),
        )
        for n in spec.nodes
    ]
    edges = [
        WorkflowEdge(
            id=e.id,
            source=e.source,
            target=e.target,
            type=e.type,
            conditions=e.conditions,
            label=e.label,
        )
        for e in spec.edges
    ]
    variables = {
        name: Variable(type=v.type, default=v.default, required=v.required, description=v.description)
        for name, v in spec.variables.items()
    }
    return WorkflowDefinition(nodes=nodes, edges=edges, variables=variables)


def parse_visual_graph(raw: Dict[str, Any]) -> VisualGraph:
    """ Validate an editor graph document (nodes + edges in the canvas shape). """
    spec = _validate(VisualGraphSpec, raw)
    nodes = [
        VisualNode(
            id=n.id,
            type=n.type or "task",
            position=Position(n.position.x, n.position.y),
            data=VisualNodeData(
                label=n.data.label,
                config=n.data.config or {},
                inputs=n.data.inputs or {},
                outputs=n.data.outputs or {},
                description=n.data.description,
            ),
        )
        for n in spec.nodes
    ]
    edges = [
        VisualEdge(
            id=e.id,
            source=e.source,
            target=e.target,
            type=e.type,
            label=e.data.label,
            condition=e.data.condition,
            animated=e.data.animated,
        )
        for e in spec.edges
    ]
    return VisualGraph(nodes=nodes, edges=edges)
