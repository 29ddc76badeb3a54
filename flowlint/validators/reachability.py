"""Element reachability validators."""

from dataclasses import dataclass

from ..graph.process_graph import ReachabilityGraph
from .base import CheckResult, ErrorKind
from .deadline import Deadline


@dataclass(frozen=True)
class ReachabilityReport:
    """Partition of a scope's elements by reachability from its start events."""

    reachable: frozenset[str]
    unreachable: tuple[str, ...]  # In element order


def analyze_reachability(
    graph: ReachabilityGraph, deadline: Deadline | None = None
) -> ReachabilityReport:
    """Compute which elements of a scope can be reached from a start event.

    Args:
        graph: The scope graph.
        deadline: Optional deadline checked inside the traversal.

    Returns:
        ReachabilityReport; reachable and unreachable together cover every
        declared element exactly once.
    """
    reachable = graph.get_reachable_nodes(deadline)
    unreachable = tuple(n for n in graph.nodes if n not in reachable)
    return ReachabilityReport(reachable=frozenset(reachable), unreachable=unreachable)


def check_unreachable_elements(
    graph: ReachabilityGraph,
    deadline: Deadline | None = None,
    report: ReachabilityReport | None = None,
) -> CheckResult:
    """Check for elements that cannot be reached from any start event.

    A scope without start events reports every element as unreachable; this
    goes together with the missing-start-event diagnostic.

    Args:
        graph: The scope graph.
        deadline: Optional deadline checked inside the traversal.
        report: A precomputed report for this graph, if one exists.

    Returns:
        CheckResult with one error per unreachable element.
    """
    result = CheckResult(scope_id=graph.scope_id)
    if report is None:
        report = analyze_reachability(graph, deadline)

    for node_id in report.unreachable:
        node_type = graph.get_node_type(node_id)
        result.add_error(
            ErrorKind.UNREACHABLE_ELEMENT,
            f"Element {node_id} is unreachable from any start event",
            element_id=node_id,
            element_type=node_type.value if node_type else None,
            suggestion="Add sequence flows to connect this element to the process flow",
        )

    return result
