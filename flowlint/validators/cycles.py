"""Loop detection over sequence flows."""

import networkx as nx

from ..graph.process_graph import ReachabilityGraph
from .base import CheckResult, ErrorKind


def find_loops(graph: ReachabilityGraph) -> list[list[str]]:
    """Find the loops of a scope.

    A loop is a strongly connected component of the sequence-flow graph with
    more than one element, or a single element that flows into itself.

    Args:
        graph: The scope graph.

    Returns:
        Loops as lists of element ids in element order, ordered by their
        first element.
    """
    flow_graph = graph.flow_graph()
    order = {node_id: index for index, node_id in enumerate(graph.nodes)}

    loops = []
    for component in nx.strongly_connected_components(flow_graph):
        if len(component) == 1:
            (node_id,) = component
            if not flow_graph.has_edge(node_id, node_id):
                continue
        loops.append(sorted(component, key=order.__getitem__))

    loops.sort(key=lambda loop: order[loop[0]])
    return loops


def check_cycles(graph: ReachabilityGraph) -> CheckResult:
    """Check for loops that no sequence flow leaves.

    Loops are ordinary in process models; one is only an error when tokens
    entering it can never get out.

    Args:
        graph: The scope graph.

    Returns:
        CheckResult with one error per inescapable loop.
    """
    result = CheckResult(scope_id=graph.scope_id)

    for loop in find_loops(graph):
        members = set(loop)
        has_exit = any(
            flow.target_ref not in members
            for node_id in loop
            for flow in graph.outgoing_flows(node_id)
        )
        if has_exit:
            continue

        result.add_error(
            ErrorKind.SEQUENCE_FLOW_CYCLE,
            f"Loop {' -> '.join(loop)} has no outgoing flow; tokens can never leave it",
            element_id=loop[0],
            element_type=graph.get_node_type(loop[0]).value,
            suggestion="Add a gateway with an exit flow to the loop",
        )

    return result
