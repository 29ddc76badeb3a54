"""Sequence flow reference validator."""

from ..graph.process_graph import ReachabilityGraph
from .base import CheckResult, ErrorKind


def check_flow_consistency(graph: ReachabilityGraph) -> CheckResult:
    """Check that both endpoints of every sequence flow name an element of the scope.

    Source and target are checked independently, so a flow with both ends
    dangling yields two errors. The issue's element id is the flow id.

    Args:
        graph: The scope graph.

    Returns:
        CheckResult with errors for unresolved endpoints.
    """
    result = CheckResult(scope_id=graph.scope_id)

    for flow in graph.flows:
        if not graph.has_node(flow.source_ref):
            result.add_error(
                ErrorKind.SEQUENCE_FLOW_INVALID_TARGET,
                f"Sequence flow {flow.id} references non-existent source {flow.source_ref}",
                element_id=flow.id,
                element_type="sequenceFlow",
            )

        if not graph.has_node(flow.target_ref):
            result.add_error(
                ErrorKind.SEQUENCE_FLOW_INVALID_TARGET,
                f"Sequence flow {flow.id} references non-existent target {flow.target_ref}",
                element_id=flow.id,
                element_type="sequenceFlow",
            )

    return result
