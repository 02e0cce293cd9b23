"""Tests for workflow data models."""

import dataclasses

import pytest
from flowdef.exceptions import DefinitionError
from flowdef.workflow.models import (
    ExecutionPlan,
    NodeData,
    NodeType,
    ValidationResult,
    Variable,
    VariableType,
    WorkflowDefinition,
    WorkflowEdge,
    WorkflowNode,
)


def test_node_type_is_coerced_from_string():
    """Test that a plain string type becomes a NodeType member."""
    node = WorkflowNode(id="a", type="approval")
    assert node.type is NodeType.APPROVAL


def test_unknown_node_type_is_rejected():
    """Test that the canonical model never holds an unknown type."""
    with pytest.raises(DefinitionError, match="Unknown node type"):
        WorkflowNode(id="a", type="parallel")


def test_duplicate_node_ids_are_rejected():
    """Test that two nodes with the same id cannot form a definition."""
    with pytest.raises(DefinitionError, match="Duplicate node id: a"):
        WorkflowDefinition(nodes=[WorkflowNode("a", NodeType.TASK), WorkflowNode("a", NodeType.END)])


def test_duplicate_edge_ids_are_rejected():
    nodes = [WorkflowNode("a", NodeType.START), WorkflowNode("b", NodeType.END)]
    edges = [WorkflowEdge("e1", "a", "b"), WorkflowEdge("e1", "a", "b")]
    with pytest.raises(DefinitionError, match="Duplicate edge id: e1"):
        WorkflowDefinition(nodes=nodes, edges=edges)


def test_definition_is_immutable():
    """Test that sequences are stored as tuples and fields cannot be reassigned."""
    definition = WorkflowDefinition(nodes=[WorkflowNode("a", NodeType.START)])
    assert isinstance(definition.nodes, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        definition.nodes = ()


def test_definition_lookup_helpers():
    nodes = [WorkflowNode("s", NodeType.START), WorkflowNode("t", NodeType.TASK), WorkflowNode("e", NodeType.END)]
    edges = [WorkflowEdge("e1", "s", "t"), WorkflowEdge("e2", "t", "e")]
    definition = WorkflowDefinition(nodes=nodes, edges=edges)

    assert definition.get_node("t").type is NodeType.TASK
    assert definition.get_node("missing") is None
    assert definition.node_ids() == ["s", "t", "e"]
    assert [e.id for e in definition.edges_from("t")] == ["e2"]
    assert [e.id for e in definition.edges_to("t")] == ["e1"]
    assert [n.id for n in definition.nodes_of_type(NodeType.END)] == ["e"]


def test_variable_type_validation():
    assert Variable(type="number").type is VariableType.NUMBER
    with pytest.raises(DefinitionError):
        Variable(type="date")


def test_validation_result_is_valid_tracks_errors():
    """Test that is_valid is derived from the error list."""
    assert ValidationResult().is_valid is True
    result = ValidationResult(errors=["boom"])
    assert result.is_valid is False
    assert result.to_dict() == {"isValid": False, "errors": ["boom"]}


def test_execution_plan_flattens_groups():
    """Test that execution order is the flattening of the parallel groups."""
    plan = ExecutionPlan(parallel_groups=[["s"], ["a", "b"], ["e"]], dependencies={"a": ["s"]})
    assert plan.execution_order == ("s", "a", "b", "e")
    assert plan.to_dict() == {
        "executionOrder": ["s", "a", "b", "e"],
        "dependencies": {"a": ["s"]},
        "parallelGroups": [["s"], ["a", "b"], ["e"]],
    }


def test_edge_expression_reads_conditions():
    assert WorkflowEdge("e1", "a", "b", conditions={"expression": "x > 1"}).expression == "x > 1"
    assert WorkflowEdge("e1", "a", "b").expression is None


def test_definitions_are_hashable():
    """Test that payload mappings do not stop a definition from being hashed."""
    def build():
        return WorkflowDefinition(
            nodes=[
                WorkflowNode("s", NodeType.START),
                WorkflowNode("t", NodeType.TASK, data=NodeData(label="T", config={"retries": [1, 2]})),
            ],
            edges=[WorkflowEdge("e1", "s", "t", conditions={"expression": "x > 1"})],
            variables={"items": Variable(type="array", default=[])},
        )

    first, second = build(), build()
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert isinstance(hash(ExecutionPlan(parallel_groups=[["s"]], dependencies={"s": []})), int)
