"""Extra required-attribute and reference checks for strict mode."""

from ..graph.process_graph import ReachabilityGraph
from ..schema.models import Event, EventType, Gateway, GatewayType, SubProcess, Task
from .base import CheckResult, ErrorKind

_CONDITIONAL_SPLITS = {GatewayType.EXCLUSIVE, GatewayType.INCLUSIVE}


def check_strict_compliance(graph: ReachabilityGraph) -> CheckResult:
    """Check the attributes and references that lenient validation tolerates.

    Args:
        graph: The scope graph.

    Returns:
        CheckResult with compliance errors and warnings.
    """
    result = CheckResult(scope_id=graph.scope_id)

    for element in graph.iter_elements():
        if isinstance(element, Task):
            _check_task(result, element)
        elif isinstance(element, Gateway):
            _check_gateway(result, graph, element)
        elif isinstance(element, Event):
            _check_event(result, graph, element)
        elif isinstance(element, SubProcess):
            _check_subprocess(result, element)

    return result


def _check_task(result: CheckResult, task: Task) -> None:
    if task.task_type is None:
        result.add_error(
            ErrorKind.MISSING_REQUIRED_ATTRIBUTE,
            f"Task {task.id} is missing required 'taskType' attribute",
            element_id=task.id,
            element_type="task",
        )


def _check_gateway(result: CheckResult, graph: ReachabilityGraph, gateway: Gateway) -> None:
    outgoing = graph.outgoing_flows(gateway.id)
    outgoing_ids = {flow.id for flow in outgoing}

    if gateway.default_flow and gateway.default_flow not in outgoing_ids:
        result.add_error(
            ErrorKind.INVALID_REFERENCE,
            f"Gateway {gateway.id} names default flow {gateway.default_flow}, "
            "which is not one of its outgoing flows",
            element_id=gateway.id,
            element_type="gateway",
        )

    if len(outgoing) < 2 or gateway.gateway_type not in _CONDITIONAL_SPLITS:
        return

    default_id = graph.default_flow_id(gateway)
    if gateway.gateway_type == GatewayType.INCLUSIVE and default_id is None:
        result.add_warning(
            ErrorKind.INCLUSIVE_NO_DEFAULT,
            f"Inclusive gateway {gateway.id} has no default flow",
            element_id=gateway.id,
            element_type="gateway",
            suggestion="Mark one outgoing flow as the gateway's default flow",
        )

    for flow in outgoing:
        if flow.id == default_id or flow.is_default:
            continue
        if not flow.has_condition:
            result.add_warning(
                ErrorKind.SEQUENCE_FLOW_NO_CONDITION,
                f"Flow {flow.id} leaves {gateway.gateway_type.value} gateway "
                f"{gateway.id} without a condition",
                element_id=gateway.id,
                element_type="gateway",
                suggestion=f"Add a conditionExpression to {flow.id}",
            )


def _check_event(result: CheckResult, graph: ReachabilityGraph, event: Event) -> None:
    if event.event_type != EventType.BOUNDARY or not event.attached_to_ref:
        return

    host = graph.get_element(event.attached_to_ref)
    if not isinstance(host, (Task, SubProcess)):
        result.add_error(
            ErrorKind.INVALID_REFERENCE,
            f"Boundary event {event.id} is attached to {event.attached_to_ref}, "
            "which is not an activity of this scope",
            element_id=event.id,
            element_type="event",
        )


def _check_subprocess(result: CheckResult, subprocess: SubProcess) -> None:
    if not subprocess.flow_elements:
        result.add_error(
            ErrorKind.SUBPROCESS_NO_ELEMENTS,
            f"Subprocess {subprocess.id} has no flow elements",
            element_id=subprocess.id,
            element_type="subprocess",
        )
