"""Diagnostic types and validation results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorKind(str, Enum):
    """Closed set of diagnostic kinds."""

    # Reachability
    UNREACHABLE_ELEMENT = "unreachable_element"
    DEAD_END = "dead_end"

    # Gateways
    GATEWAY_NO_INCOMING = "gateway_no_incoming"
    GATEWAY_NO_OUTGOING = "gateway_no_outgoing"
    XOR_NO_DEFAULT = "xor_no_default"
    INCLUSIVE_NO_DEFAULT = "inclusive_no_default"
    GATEWAY_JOIN_INCONSISTENCY = "gateway_join_inconsistency"

    # Events. The wire value "start_event_multiple" is kept for compatibility
    # but the rule fires when a scope has no start event at all.
    START_EVENT_MISSING = "start_event_multiple"
    START_EVENT_MULTIPLE = "start_event_multiple"
    END_EVENT_MISSING = "end_event_missing"
    EVENT_NO_DEFINITION = "event_no_definition"
    BOUNDARY_EVENT_INVALID = "boundary_event_invalid"

    # Flows
    SEQUENCE_FLOW_INVALID_TARGET = "sequence_flow_invalid_target"
    SEQUENCE_FLOW_NO_CONDITION = "sequence_flow_no_condition"
    SEQUENCE_FLOW_CYCLE = "sequence_flow_cycle"

    # Structure and compliance
    SUBPROCESS_NO_ELEMENTS = "subprocess_no_elements"
    MISSING_REQUIRED_ATTRIBUTE = "missing_required_attribute"
    INVALID_REFERENCE = "invalid_reference"
    COMPLEXITY_EXCEEDED = "complexity_exceeded"

    # A checker failed unexpectedly
    INTERNAL_CHECK_ERROR = "internal_check_error"


@dataclass(frozen=True)
class ValidationIssue:
    """A single diagnostic."""

    kind: ErrorKind
    message: str
    severity: Severity
    element_id: str | None = None
    element_type: str | None = None
    suggestion: str | None = None
    process_id: str | None = None

    def __str__(self) -> str:
        location = ""
        if self.process_id:
            location = f" [{self.process_id}"
            if self.element_id:
                location += f".{self.element_id}"
            location += "]"
        elif self.element_id:
            location = f" [{self.element_id}]"
        return f"{self.severity.value.upper()}: {self.kind.value}{location} - {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "message": self.message,
            "elementId": self.element_id,
            "elementType": self.element_type,
            "severity": self.severity.value,
            "suggestion": self.suggestion,
            "processId": self.process_id,
        }


@dataclass
class CheckResult:
    """Issues collected by one checker over one scope."""

    issues: list[ValidationIssue] = field(default_factory=list)
    scope_id: str | None = None

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning- and info-level issues."""
        return [i for i in self.issues if i.severity != Severity.ERROR]

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def is_valid(self) -> bool:
        """Check if no error-level issue was found."""
        return not self.has_errors

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def add_error(
        self,
        kind: ErrorKind,
        message: str,
        element_id: str | None = None,
        element_type: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Add an error issue."""
        self._add(Severity.ERROR, kind, message, element_id, element_type, suggestion)

    def add_warning(
        self,
        kind: ErrorKind,
        message: str,
        element_id: str | None = None,
        element_type: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Add a warning issue."""
        self._add(Severity.WARNING, kind, message, element_id, element_type, suggestion)

    def merge(self, other: "CheckResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)

    def _add(self, severity, kind, message, element_id, element_type, suggestion) -> None:
        self.issues.append(
            ValidationIssue(
                kind=kind,
                message=message,
                severity=severity,
                element_id=element_id,
                element_type=element_type,
                suggestion=suggestion,
                process_id=self.scope_id,
            )
        )


@dataclass(frozen=True)
class ValidationStatistics:
    """Aggregate figures over every validated scope."""

    total_elements: int = 0
    elements_by_type: dict[str, int] = field(default_factory=dict)
    reachable_elements: int = 0
    unreachable_elements: int = 0
    dead_ends: int = 0
    cycles: int = 0
    complexity_score: int = 0
    processes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalElements": self.total_elements,
            "elementsByType": dict(self.elements_by_type),
            "reachableElements": self.reachable_elements,
            "unreachableElements": self.unreachable_elements,
            "deadEnds": self.dead_ends,
            "cycles": self.cycles,
            "complexityScore": self.complexity_score,
            "processes": self.processes,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a set of process definitions."""

    valid: bool
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)
    statistics: ValidationStatistics = field(default_factory=ValidationStatistics)

    @property
    def issues(self) -> list[ValidationIssue]:
        """Errors followed by warnings."""
        return [*self.errors, *self.warnings]

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def is_valid(self) -> bool:
        return self.valid

    def errors_of(self, kind: ErrorKind) -> list[ValidationIssue]:
        """Get error-level issues of one kind."""
        return [i for i in self.errors if i.kind == kind]

    def warnings_of(self, kind: ErrorKind) -> list[ValidationIssue]:
        """Get warning- and info-level issues of one kind."""
        return [i for i in self.warnings if i.kind == kind]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [i.to_dict() for i in self.errors],
            "warnings": [i.to_dict() for i in self.warnings],
            "statistics": self.statistics.to_dict(),
        }
