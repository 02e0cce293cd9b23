""" Execution planning: Kahn's algorithm split into parallel levels. """

from logging import getLogger
from typing import Dict, List

from .models import ExecutionPlan, WorkflowDefinition

logger = getLogger(__name__)


def generate_execution_plan(definition: WorkflowDefinition) -> ExecutionPlan:
    """
    Group nodes into levels that can run concurrently.

    Every zero in-degree node seeds the first level, not only the start node.
    Nodes on a cycle never reach zero in-degree and are left out of the plan;
    run the validator first when full coverage matters. Edges with an unknown
    endpoint are ignored for ordering. Within a level nodes keep authoring order.
    """
    position = {node.id: index for index, node in enumerate(definition.nodes)}
    dependencies: Dict[str, List[str]] = {node.id: [] for node in definition.nodes}
    indegree: Dict[str, int] = {node.id: 0 for node in definition.nodes}
    adjacency: Dict[str, List[str]] = {node.id: [] for node in definition.nodes}

    for edge in definition.edges:
        if edge.target not in position:
            continue
        # nominal predecessor even when the source is unknown or never runs
        dependencies[edge.target].append(edge.source)
        if edge.source not in position:
            continue
        indegree[edge.target] += 1
        adjacency[edge.source].append(edge.target)

    groups: List[List[str]] = []
    level = [node.id for node in definition.nodes if indegree[node.id] == 0]
    while level:
        groups.append(level)
        ready: List[str] = []
        for node_id in level:
            for neighbour in adjacency[node_id]:
                indegree[neighbour] -= 1
                if indegree[neighbour] == 0:
                    ready.append(neighbour)
        level = sorted(ready, key=position.__getitem__)

    plan = ExecutionPlan(parallel_groups=groups, dependencies=dependencies)
    skipped = len(definition.nodes) - len(plan.execution_order)
    if skipped:
        logger.debug("Execution plan left out %d node(s) that never became ready", skipped)
    return plan
