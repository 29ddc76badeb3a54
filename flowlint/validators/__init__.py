"""Validators for structural validation of process definitions."""

from .base import (
    CheckResult,
    ErrorKind,
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationStatistics,
)
from .compliance import check_strict_compliance
from .complexity import calculate_complexity_score, check_complexity
from .cycles import check_cycles, find_loops
from .dead_ends import check_dead_ends
from .deadline import Deadline
from .errors import ValidationTimeout
from .events import check_event_consistency
from .flows import check_flow_consistency
from .gateways import check_gateway_consistency, check_join_balance, find_nearest_join
from .reachability import ReachabilityReport, analyze_reachability, check_unreachable_elements
from .runner import (
    BpmnValidator,
    validate_definitions,
    validate_file,
    validate_ir,
    validate_process,
)

__all__ = [
    "CheckResult",
    "ErrorKind",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "ValidationStatistics",
    "check_strict_compliance",
    "calculate_complexity_score",
    "check_complexity",
    "check_cycles",
    "find_loops",
    "check_dead_ends",
    "Deadline",
    "ValidationTimeout",
    "check_event_consistency",
    "check_flow_consistency",
    "check_gateway_consistency",
    "check_join_balance",
    "find_nearest_join",
    "ReachabilityReport",
    "analyze_reachability",
    "check_unreachable_elements",
    "BpmnValidator",
    "validate_definitions",
    "validate_file",
    "validate_ir",
    "validate_process",
]
