"""
Structural validation of workflow definitions.

Every check runs and appends its messages, so callers can show all problems
at once. Nothing here raises for well-typed input.
"""

from logging import getLogger
from typing import Dict, List, Set

from .models import NodeType, ValidationResult, WorkflowDefinition

logger = getLogger(__name__)


def validate_definition(definition: WorkflowDefinition) -> ValidationResult:
    """
    Check entry/exit cardinality, orphans, cycles, edge endpoints and edge
    direction. Messages are appended in that order.
    """
    errors: List[str] = []

    start_nodes = definition.nodes_of_type(NodeType.START)
    if not start_nodes:
        errors.append("Workflow must have at least one start node")
    elif len(start_nodes) > 1:
        errors.append("Workflow can only have one start node")

    if not definition.nodes_of_type(NodeType.END):
        errors.append("Workflow must have at least one end node")

    connected: Set[str] = set()
    for edge in definition.edges:
        connected.add(edge.source)
        connected.add(edge.target)
    orphans = [
        node for node in definition.nodes
        if node.type not in (NodeType.START, NodeType.END) and node.id not in connected
    ]
    if orphans:
        errors.append("Found orphaned nodes: " + ", ".join(n.label or n.id for n in orphans))

    if has_circular_dependency(definition):
        errors.append("Workflow contains circular dependencies")

    node_map = {node.id: node for node in definition.nodes}
    for edge in definition.edges:
        source = node_map.get(edge.source)
        target = node_map.get(edge.target)
        if source is None:
            errors.append(f"Edge {edge.id} references non-existent source node {edge.source}")
        if target is None:
            errors.append(f"Edge {edge.id} references non-existent target node {edge.target}")
        if target is not None and target.type == NodeType.START:
            errors.append("Start nodes cannot have incoming connections")
        if source is not None and source.type == NodeType.END:
            errors.append("End nodes cannot have outgoing connections")

    logger.debug("Validated definition with %d nodes: %d error(s)", len(definition.nodes), len(errors))
    return ValidationResult(errors=errors)


def has_circular_dependency(definition: WorkflowDefinition) -> bool:
    """
    Cycle check on the graph (DFS with an on-stack set). Self-loops count.
    Edges leaving unknown nodes are ignored; edges into unknown nodes are dead ends.
    """
    adjacency: Dict[str, List[str]] = {node.id: [] for node in definition.nodes}
    for edge in definition.edges:
        if edge.source in adjacency:
            adjacency[edge.source].append(edge.target)

    visited: Set[str] = set()
    on_stack: Set[str] = set()

    # iterative so deep chains do not hit the recursion limit
    for root in adjacency:
        if root in visited:
            continue
        visited.add(root)
        on_stack.add(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node_id, neighbours = stack[-1]
            advanced = False
            for neighbour in neighbours:
                if neighbour in on_stack:
                    return True
                if neighbour in visited:
                    continue
                visited.add(neighbour)
                on_stack.add(neighbour)
                stack.append((neighbour, iter(adjacency.get(neighbour, []))))
                advanced = True
                break
            if not advanced:
                on_stack.discard(node_id)
                stack.pop()
    return False
