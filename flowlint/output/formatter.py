"""Output formatting for validation results."""

import json
from typing import Literal

from ..validators.base import Severity, ValidationIssue, ValidationResult


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    errors = result.errors
    warnings = result.warnings

    lines.append("ERRORS:")
    if errors:
        for issue in errors:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("WARNINGS:")
    if warnings:
        for issue in warnings:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    stats = result.statistics
    lines.append("")
    lines.append("STATISTICS:")
    lines.append(f"  processes: {stats.processes}")
    lines.append(f"  elements: {stats.total_elements}")
    if stats.elements_by_type:
        by_type = ", ".join(f"{k}={v}" for k, v in stats.elements_by_type.items())
        lines.append(f"  by type: {by_type}")
    lines.append(
        f"  reachable: {stats.reachable_elements}, unreachable: {stats.unreachable_elements}"
    )
    lines.append(f"  dead ends: {stats.dead_ends}, loops: {stats.cycles}")
    lines.append(f"  complexity score: {stats.complexity_score}")

    lines.append("")
    if result.valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    location = ""
    if issue.process_id:
        location = f"[{issue.process_id}"
        if issue.element_id:
            location += f".{issue.element_id}"
        location += "] "
    elif issue.element_id:
        location = f"[{issue.element_id}] "

    if issue.severity == Severity.ERROR:
        symbol = "✘"
    elif issue.severity == Severity.WARNING:
        symbol = "⚠"
    else:
        symbol = "ℹ"

    text = f"{symbol} {issue.kind.value}: {location}{issue.message}"
    if issue.suggestion:
        text += f" (hint: {issue.suggestion})"
    return text


def _format_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    return json.dumps(result.to_dict(), indent=2)
