"""Gateway consistency validators."""

from collections import deque

from ..graph.process_graph import ReachabilityGraph
from ..schema.models import Gateway, GatewayType
from .base import CheckResult, ErrorKind
from .deadline import Deadline

# Splits whose matching join can be determined locally. Inclusive and complex
# joins depend on which branches are live at runtime.
_SYNCHRONIZING = {GatewayType.PARALLEL}
_CHOOSING = {GatewayType.EXCLUSIVE, GatewayType.EVENT_BASED}


def check_gateway_consistency(
    graph: ReachabilityGraph, deadline: Deadline | None = None
) -> CheckResult:
    """Check gateway arity, default flows and split/join balance.

    This validator checks:
    - Every gateway has at least one incoming and one outgoing flow
    - An exclusive split with guarded flows has a default flow
    - Splits are closed by a join of a compatible kind

    Args:
        graph: The scope graph.
        deadline: Optional deadline checked inside the join search.

    Returns:
        CheckResult with errors for inconsistent gateways.
    """
    result = CheckResult(scope_id=graph.scope_id)

    for gateway in graph.get_gateways():
        outgoing = graph.outgoing_flows(gateway.id)

        if graph.in_degree(gateway.id) == 0:
            result.add_error(
                ErrorKind.GATEWAY_NO_INCOMING,
                f"Gateway {gateway.id} has no incoming flows",
                element_id=gateway.id,
                element_type="gateway",
            )

        if not outgoing:
            result.add_error(
                ErrorKind.GATEWAY_NO_OUTGOING,
                f"Gateway {gateway.id} has no outgoing flows",
                element_id=gateway.id,
                element_type="gateway",
            )

        if (
            gateway.gateway_type == GatewayType.EXCLUSIVE
            and len(outgoing) > 1
            and any(flow.has_condition for flow in outgoing)
            and graph.default_flow_id(gateway) is None
        ):
            result.add_error(
                ErrorKind.XOR_NO_DEFAULT,
                f"Exclusive gateway {gateway.id} with conditions must have a default flow",
                element_id=gateway.id,
                element_type="gateway",
                suggestion="Mark one outgoing flow as the gateway's default flow",
            )

    result.merge(check_join_balance(graph, deadline))
    return result


def check_join_balance(
    graph: ReachabilityGraph, deadline: Deadline | None = None
) -> CheckResult:
    """Check that each split is closed by a join that matches its kind.

    For every parallel, exclusive or event-based gateway with more than one
    outgoing flow, the nearest merging gateway common to all branches is
    located (see ``find_nearest_join``) and compared against the split:

    - A parallel split closed by an exclusive or event-based join lets
      unsynchronized tokens through.
    - An exclusive or event-based split closed by a parallel join deadlocks:
      the join waits for branches that never fire.
    - A parallel join with more incoming flows than the split's branches
      feed also deadlocks.
    - A parallel split whose branches never meet again is reported as a
      warning.

    Args:
        graph: The scope graph.
        deadline: Optional deadline checked inside the join search.

    Returns:
        CheckResult with join-inconsistency issues, anchored on the split.
    """
    result = CheckResult(scope_id=graph.scope_id)

    for split in graph.get_gateways():
        kind = split.gateway_type
        if kind not in _SYNCHRONIZING and kind not in _CHOOSING:
            continue
        if graph.out_degree(split.id) < 2:
            continue

        found = find_nearest_join(graph, split.id, deadline)
        if found is None:
            if kind in _SYNCHRONIZING:
                result.add_warning(
                    ErrorKind.GATEWAY_JOIN_INCONSISTENCY,
                    f"Parallel gateway {split.id} splits into branches that are never joined",
                    element_id=split.id,
                    element_type="gateway",
                    suggestion="Join the branches with a parallel gateway before continuing",
                )
            continue

        join, regions = found
        join_kind = join.gateway_type

        if kind in _SYNCHRONIZING and join_kind in _CHOOSING:
            result.add_error(
                ErrorKind.GATEWAY_JOIN_INCONSISTENCY,
                f"Parallel gateway {split.id} is joined by {join_kind.value} gateway "
                f"{join.id}; branches are not synchronized",
                element_id=split.id,
                element_type="gateway",
                suggestion=f"Make {join.id} a parallel gateway",
            )
        elif kind in _CHOOSING and join_kind in _SYNCHRONIZING:
            result.add_error(
                ErrorKind.GATEWAY_JOIN_INCONSISTENCY,
                f"{kind.value.capitalize()} gateway {split.id} is joined by parallel "
                f"gateway {join.id}, which waits for branches that are never taken",
                element_id=split.id,
                element_type="gateway",
                suggestion=f"Make {join.id} an exclusive gateway",
            )
        elif kind in _SYNCHRONIZING and join_kind in _SYNCHRONIZING:
            fed = _count_fed_flows(graph, split.id, join.id, regions)
            expected = graph.in_degree(join.id)
            if expected > fed:
                result.add_error(
                    ErrorKind.GATEWAY_JOIN_INCONSISTENCY,
                    f"Parallel join {join.id} expects {expected} incoming tokens but "
                    f"split {split.id} only feeds {fed}",
                    element_id=split.id,
                    element_type="gateway",
                    suggestion=f"Remove the extra incoming flows of {join.id}",
                )

    return result


def find_nearest_join(
    graph: ReachabilityGraph, split_id: str, deadline: Deadline | None = None
) -> tuple[Gateway, list[dict[str, int]]] | None:
    """Find the nearest merging gateway reachable from every branch of a split.

    Each branch is explored breadth-first without passing back through the
    split. Candidates are gateways with more than one incoming flow present in
    every branch; the one with the smallest worst-case branch distance wins,
    ties broken by element order.

    Args:
        graph: The scope graph.
        split_id: Id of the splitting gateway.
        deadline: Optional deadline checked inside the searches.

    Returns:
        (join gateway, per-branch distance maps), or None if the branches
        never meet at a merging gateway.
    """
    regions = [
        _branch_distances(graph, split_id, start, deadline)
        for start in graph.successors(split_id)
    ]
    if not regions:
        return None

    order = {node_id: index for index, node_id in enumerate(graph.nodes)}
    candidates = [
        node_id
        for node_id in regions[0]
        if all(node_id in region for region in regions[1:])
        and isinstance(graph.get_element(node_id), Gateway)
        and graph.in_degree(node_id) > 1
    ]
    if not candidates:
        return None

    best = min(
        candidates,
        key=lambda n: (max(region[n] for region in regions), order[n]),
    )
    return graph.get_element(best), regions


def _branch_distances(
    graph: ReachabilityGraph, split_id: str, start: str, deadline: Deadline | None
) -> dict[str, int]:
    """BFS distances from a branch start, never re-entering the split."""
    distances = {start: 0}
    queue = deque([start])

    while queue:
        if deadline is not None:
            deadline.tick("join balance search")

        current = queue.popleft()
        for target in graph.successors(current):
            if target == split_id or target in distances:
                continue
            distances[target] = distances[current] + 1
            queue.append(target)

    return distances


def _count_fed_flows(
    graph: ReachabilityGraph,
    split_id: str,
    join_id: str,
    regions: list[dict[str, int]],
) -> int:
    """Count the join's incoming flows that a token from the split can travel."""
    fed = 0
    for flow in graph.incoming_flows(join_id):
        if flow.source_ref == split_id or any(flow.source_ref in r for r in regions):
            fed += 1
    return fed
