"""Dead-end detection validator."""

from ..graph.process_graph import ReachabilityGraph
from .base import CheckResult, ErrorKind


def check_dead_ends(graph: ReachabilityGraph) -> CheckResult:
    """Check for elements with no outgoing sequence flow that are not end events.

    Every element is checked, reachable or not. A token reaching a dead end
    is stranded.

    Args:
        graph: The scope graph.

    Returns:
        CheckResult with one error per dead end.
    """
    result = CheckResult(scope_id=graph.scope_id)

    for node_id in graph.get_dead_end_nodes():
        node_type = graph.get_node_type(node_id)
        result.add_error(
            ErrorKind.DEAD_END,
            f"Element {node_id} has no outgoing flows",
            element_id=node_id,
            element_type=node_type.value if node_type else None,
            suggestion="Add a sequence flow to the next element or to an end event",
        )

    return result
