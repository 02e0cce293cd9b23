""" Load definitions and editor graphs from YAML/JSON, and compile graphs into plans. """

import json
import re
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Dict, Iterable, Optional, Union

import yaml

from ..exceptions import DefinitionError, WorkflowValidationError
from ..settings import Settings, get_settings
from .mapper import to_definition
from .metrics import calculate_metrics
from .models import (
    ExecutionPlan,
    ValidationResult,
    VisualEdge,
    VisualGraph,
    VisualNode,
    WorkflowDefinition,
    WorkflowMetrics,
)
from .planner import generate_execution_plan
from .schema import parse_definition, parse_visual_graph
from .validator import validate_definition

logger = getLogger(__name__)


class DocumentLoader(yaml.SafeLoader):
    """ SafeLoader that only reads true/false as booleans, so labels like Yes, No, On stay strings. """


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DocumentLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


@dataclass(frozen=True)
class CompiledWorkflow:
    definition: WorkflowDefinition
    validation: ValidationResult
    plan: ExecutionPlan
    metrics: WorkflowMetrics

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            "definition": definition_to_dict(self.definition),
            "validation": self.validation.to_dict(),
            "plan": self.plan.to_dict(),
            "metrics": self.metrics.to_dict(),
        }


def _load_document(text: str) -> Dict[str, Any]:
    try:
        data = yaml.load(text, Loader=DocumentLoader)
    except yaml.YAMLError as e:
        raise DefinitionError(f"Could not parse document: {e}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DefinitionError(f"Expected a mapping at the top level, got {type(data).__name__}")
    return data


def load_definition(text: str) -> WorkflowDefinition:
    """
    Load a WorkflowDefinition from a YAML or JSON string.
    Only the document shape is checked here; structural checks live in the validator.
    """
    return parse_definition(_load_document(text))


def load_visual_graph(text: str) -> VisualGraph:
    """ Load an editor graph (nodes + edges) from a YAML or JSON string. """
    return parse_visual_graph(_load_document(text))


def definition_to_dict(definition: WorkflowDefinition) -> Dict[str, Any]:
    """ Plain JSON-compatible document for storage. """
    return {
        "nodes": [
            {
                "id": node.id,
                "type": node.type.value,
                "position": {"x": node.position.x, "y": node.position.y},
                "data": {
                    "label": node.data.label,
                    "config": dict(node.data.config),
                    "inputs": dict(node.data.inputs),
                    "outputs": dict(node.data.outputs),
                },
            }
            for node in definition.nodes
        ],
        "edges": [
            {
                "id": edge.id,
                "source": edge.source,
                "target": edge.target,
                "type": edge.type,
                "conditions": dict(edge.conditions),
                "label": edge.label,
            }
            for edge in definition.edges
        ],
        "variables": {
            name: {
                "type": var.type.value,
                "default": var.default,
                "required": var.required,
                "description": var.description,
            }
            for name, var in definition.variables.items()
        },
    }


def dump_definition(definition: WorkflowDefinition, indent: Optional[int] = 2) -> str:
    return json.dumps(definition_to_dict(definition), indent=indent)


def compile_definition(
    definition: WorkflowDefinition,
    *,
    strict: bool = False,
    settings: Optional[Settings] = None,
) -> CompiledWorkflow:
    """
    Validate, plan and measure a definition. With strict=True a definition
    that fails validation raises WorkflowValidationError instead of being returned.
    """
    settings = settings or get_settings()
    validation = validate_definition(definition)
    if strict and not validation.is_valid:
        raise WorkflowValidationError(validation.errors)
    compiled = CompiledWorkflow(
        definition=definition,
        validation=validation,
        plan=generate_execution_plan(definition),
        metrics=calculate_metrics(
            definition,
            durations=settings.node_durations,
            default_duration=settings.default_node_duration,
            branching_weight=settings.branching_weight,
        ),
    )
    logger.debug(
        "Compiled workflow: valid=%s levels=%d nodes=%d",
        compiled.is_valid, len(compiled.plan.parallel_groups), compiled.metrics.total_nodes,
    )
    return compiled


def compile_graph(
    graph: Union[VisualGraph, Iterable[VisualNode]],
    edges: Optional[Iterable[VisualEdge]] = None,
    *,
    strict: bool = False,
    settings: Optional[Settings] = None,
) -> CompiledWorkflow:
    """ Map an editor graph to a definition and compile it. """
    return compile_definition(to_definition(graph, edges), strict=strict, settings=settings)
