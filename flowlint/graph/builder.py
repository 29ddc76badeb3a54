"""Builder for converting process scopes to ReachabilityGraphs."""

import logging
from typing import TYPE_CHECKING

from ..schema.models import Event, EventType, FlowScope
from .process_graph import ReachabilityGraph

if TYPE_CHECKING:
    from ..validators.deadline import Deadline

logger = logging.getLogger(__name__)


def build_graph(scope: FlowScope, deadline: "Deadline | None" = None) -> ReachabilityGraph:
    """Build a ReachabilityGraph from a process (or subprocess) scope.

    Each subprocess becomes its own nested graph under ``graph.nested``; its
    internal elements are not flattened into the parent. Nested scopes are
    built with an explicit work stack so arbitrarily deep nesting cannot
    exhaust the call stack.

    Args:
        scope: The process or subprocess to build.
        deadline: Optional deadline checked between scopes.

    Returns:
        The graph of the outermost scope.
    """
    root = _build_scope(scope, parent_id=None)
    pending = [(root, scope)]

    while pending:
        if deadline is not None:
            deadline.check("graph building")

        graph, body = pending.pop()
        for subprocess in body.subprocesses():
            nested = _build_scope(subprocess, parent_id=graph.scope_id)
            graph.nested[subprocess.id] = nested
            pending.append((nested, subprocess))

    return root


def _build_scope(scope: FlowScope, parent_id: str | None) -> ReachabilityGraph:
    """Build the graph of a single scope, without descending into subprocesses."""
    graph = ReachabilityGraph(scope.id, parent_id=parent_id)

    # Add all elements first so flows can tell declared endpoints from dangling ones
    for element in scope.flow_elements:
        graph.add_element(element)

    for flow in scope.sequence_flows:
        graph.add_sequence_flow(flow)

    # Boundary events hang off their host activity
    for element in scope.flow_elements:
        if (
            isinstance(element, Event)
            and element.event_type == EventType.BOUNDARY
            and element.attached_to_ref
            and graph.has_node(element.attached_to_ref)
        ):
            graph.add_attachment(element.attached_to_ref, element.id)

    logger.debug(f"Built scope graph: {graph.describe()}")
    return graph
