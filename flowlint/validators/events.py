"""Event consistency validator."""

from ..graph.process_graph import ReachabilityGraph
from ..schema.models import EventType
from .base import CheckResult, ErrorKind


def check_event_consistency(graph: ReachabilityGraph) -> CheckResult:
    """Check start/end cardinality and event well-formedness for one scope.

    This validator checks:
    - The scope has at least one start event
    - The scope has at least one end event
    - Events that declare an event definition list declare at least one
    - Boundary events are attached to an activity

    Only the scope's own elements are counted; nested subprocess scopes are
    checked on their own.

    Args:
        graph: The scope graph.

    Returns:
        CheckResult with errors for inconsistent events.
    """
    result = CheckResult(scope_id=graph.scope_id)

    for event in graph.get_events():
        if event.event_definitions is not None and len(event.event_definitions) == 0:
            result.add_error(
                ErrorKind.EVENT_NO_DEFINITION,
                f"Event {event.id} has no event definitions",
                element_id=event.id,
                element_type="event",
                suggestion="Add an event definition or omit the eventDefinitions list",
            )

        if event.event_type == EventType.BOUNDARY and not event.attached_to_ref:
            result.add_error(
                ErrorKind.BOUNDARY_EVENT_INVALID,
                f"Boundary event {event.id} must be attached to an activity",
                element_id=event.id,
                element_type="event",
                suggestion="Set attachedToRef to the id of the activity this event guards",
            )

    if not graph.start_nodes:
        result.add_error(
            ErrorKind.START_EVENT_MISSING,
            f"Scope {graph.scope_id} must have at least one start event",
            suggestion="Add a start event and connect it to the first element",
        )

    if not graph.end_nodes:
        result.add_error(
            ErrorKind.END_EVENT_MISSING,
            f"Scope {graph.scope_id} must have at least one end event",
            suggestion="Add an end event after the last element",
        )

    return result
