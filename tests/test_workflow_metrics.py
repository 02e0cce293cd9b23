"""Tests for workflow metrics."""

import pytest
from flowdef.workflow.metrics import NODE_DURATIONS, calculate_metrics
from flowdef.workflow.models import NodeType, WorkflowDefinition, WorkflowEdge, WorkflowNode


def make_definition(nodes, edges=()):
    return WorkflowDefinition(
        nodes=[WorkflowNode(node_id, node_type) for node_id, node_type in nodes],
        edges=[WorkflowEdge(f"e{i}", source, target) for i, (source, target) in enumerate(edges, start=1)],
    )


def test_linear_metrics():
    definition = make_definition(
        [("start", "start"), ("a", "task"), ("end", "end")],
        [("start", "a"), ("a", "end")],
    )
    metrics = calculate_metrics(definition)
    assert metrics.total_nodes == 3
    assert metrics.total_edges == 2
    assert metrics.complexity == 5
    assert metrics.estimated_duration == 5
    assert metrics.node_types == {"start": 1, "end": 1, "task": 1}


def test_empty_definition_metrics_are_zero():
    metrics = calculate_metrics(WorkflowDefinition())
    assert metrics.to_dict() == {
        "totalNodes": 0,
        "totalEdges": 0,
        "complexity": 0,
        "estimatedDuration": 0,
        "nodeTypes": {},
    }


def test_approvals_weigh_on_complexity_and_duration():
    """Test the histogram, branching weight and duration table together."""
    definition = make_definition(
        [("start", "start"), ("t1", "task"), ("a1", "approval"), ("t2", "task"),
         ("a2", "approval"), ("t3", "task"), ("end", "end")],
        [("start", "t1"), ("t1", "a1"), ("a1", "t2"), ("t2", "a2"), ("a2", "t3"), ("t3", "end")],
    )
    metrics = calculate_metrics(definition)
    assert metrics.node_types == {"start": 1, "end": 1, "task": 3, "approval": 2}
    assert metrics.complexity == 7 + 6 + 4
    assert metrics.estimated_duration == 135


@pytest.mark.parametrize("node_type, minutes", [
    ("start", 0), ("end", 0), ("task", 5), ("approval", 60), ("condition", 0.1),
    ("ai_agent", 2), ("human_task", 15), ("api_call", 1), ("webhook", 0.5),
])
def test_duration_table(node_type, minutes):
    metrics = calculate_metrics(make_definition([("n", node_type)]))
    assert metrics.estimated_duration == pytest.approx(minutes)


def test_duration_table_covers_every_node_type():
    assert set(NODE_DURATIONS) == set(NodeType)


def test_condition_counts_as_branching():
    metrics = calculate_metrics(make_definition([("c", "condition")]))
    assert metrics.complexity == 1 + 2


def test_custom_duration_table_falls_back_to_default():
    """Test that types missing from a supplied table use the default duration."""
    definition = make_definition([("a", "task"), ("b", "webhook")])
    metrics = calculate_metrics(definition, durations={NodeType.TASK: 1}, default_duration=7)
    assert metrics.estimated_duration == 8


def test_branching_weight_override():
    definition = make_definition([("a", "approval")])
    assert calculate_metrics(definition, branching_weight=0).complexity == 1


def test_metrics_are_deterministic():
    definition = make_definition([("s", "start"), ("c", "condition"), ("w", "webhook")], [("s", "c"), ("c", "w")])
    assert calculate_metrics(definition) == calculate_metrics(definition)
