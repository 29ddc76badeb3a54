"""Size/shape complexity metric."""

from typing import Iterable

from ..schema.models import Process
from .base import CheckResult, ErrorKind

# Weights in tenths so the sum stays exact before the final rounding
_ELEMENT_WEIGHT = 5
_GATEWAY_WEIGHT = 20
_EVENT_WEIGHT = 10
_FLOW_WEIGHT = 3


def process_complexity_tenths(process: Process) -> int:
    """Complexity of one process's top-level scope, in tenths of a point.

    0.5 per flow element, 2 per gateway, 1 per event and 0.3 per sequence
    flow.
    """
    gateways = len(process.gateways())
    events = len(process.events())
    return (
        _ELEMENT_WEIGHT * len(process.flow_elements)
        + _GATEWAY_WEIGHT * gateways
        + _EVENT_WEIGHT * events
        + _FLOW_WEIGHT * len(process.sequence_flows)
    )


def calculate_complexity_score(processes: Iterable[Process]) -> int:
    """Sum the complexity of all processes and round to the nearest integer.

    Halves round up. Adding elements or flows never lowers the score.

    Args:
        processes: The processes of a definitions document.

    Returns:
        The rounded complexity score.
    """
    tenths = sum(process_complexity_tenths(p) for p in processes)
    return (tenths + 5) // 10


def check_complexity(score: int, max_score: int | float | None) -> CheckResult:
    """Warn when the complexity score exceeds the advisory threshold.

    Args:
        score: The computed complexity score.
        max_score: The threshold, or None to skip the check.

    Returns:
        CheckResult with at most one warning; never an error.
    """
    result = CheckResult()
    if max_score is not None and score > max_score:
        result.add_warning(
            ErrorKind.COMPLEXITY_EXCEEDED,
            f"Complexity score {score} exceeds the configured maximum of {max_score:g}",
            suggestion="Split the process into subprocesses or separate processes",
        )
    return result
