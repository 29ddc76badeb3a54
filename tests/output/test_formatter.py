"""Tests for result formatting."""

import json

from flowlint.output.formatter import format_validation_result
from flowlint.validators.base import (
    ErrorKind,
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationStatistics,
)


def _result(errors=(), warnings=()) -> ValidationResult:
    return ValidationResult(
        valid=not errors,
        errors=list(errors),
        warnings=list(warnings),
        statistics=ValidationStatistics(
            total_elements=3,
            elements_by_type={"event": 2, "task": 1},
            reachable_elements=3,
            complexity_score=4,
            processes=1,
        ),
    )


DANGLING = ValidationIssue(
    kind=ErrorKind.SEQUENCE_FLOW_INVALID_TARGET,
    message="Sequence flow F1 references non-existent target Ghost",
    severity=Severity.ERROR,
    element_id="F1",
    element_type="sequenceFlow",
    process_id="P",
)

TOO_COMPLEX = ValidationIssue(
    kind=ErrorKind.COMPLEXITY_EXCEEDED,
    message="Complexity score 60 exceeds the configured maximum of 50",
    severity=Severity.WARNING,
    suggestion="Split the process",
)


class TestTextFormat:
    def test_passed(self):
        text = format_validation_result(_result())

        assert "ERRORS:\n  (none)" in text
        assert "WARNINGS:\n  (none)" in text
        assert "by type: event=2, task=1" in text
        assert text.endswith("Validation passed")

    def test_failed(self):
        text = format_validation_result(_result(errors=[DANGLING], warnings=[TOO_COMPLEX]))

        assert "✘ sequence_flow_invalid_target: [P.F1] Sequence flow F1" in text
        assert "⚠ complexity_exceeded: Complexity score 60" in text
        assert "(hint: Split the process)" in text
        assert text.endswith("Validation failed: 1 error(s), 1 warning(s)")

    def test_passed_with_warnings(self):
        text = format_validation_result(_result(warnings=[TOO_COMPLEX]))
        assert text.endswith("Validation passed with 1 warning(s)")


class TestJsonFormat:
    def test_json_shape(self):
        data = json.loads(format_validation_result(_result(errors=[DANGLING]), "json"))

        assert data["valid"] is False
        assert data["errors"][0] == {
            "type": "sequence_flow_invalid_target",
            "message": "Sequence flow F1 references non-existent target Ghost",
            "elementId": "F1",
            "elementType": "sequenceFlow",
            "severity": "error",
            "suggestion": None,
            "processId": "P",
        }
        assert data["warnings"] == []
        assert data["statistics"]["elementsByType"] == {"event": 2, "task": 1}
        assert data["statistics"]["complexityScore"] == 4
