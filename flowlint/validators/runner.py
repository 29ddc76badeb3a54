"""Validation runner that orchestrates all validators."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from ..config import ValidationOptions
from ..graph.builder import build_graph
from ..graph.process_graph import ReachabilityGraph, iter_scopes
from ..schema.errors import SchemaValidationError
from ..schema.loader import parse_definitions, parse_definitions_data
from ..schema.models import Definitions, Process
from .base import (
    CheckResult,
    ErrorKind,
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
from .gateways import check_gateway_consistency
from .reachability import (
    ReachabilityReport,
    analyze_reachability,
    check_unreachable_elements,
)

logger = logging.getLogger(__name__)


@dataclass
class ScopeContext:
    """Everything a checker may read about one scope."""

    graph: ReachabilityGraph
    deadline: Deadline
    reachability: ReachabilityReport | None = None


Check = Callable[[ScopeContext], CheckResult]


class _Tally:
    """Running statistics for one validation call."""

    def __init__(self):
        self.total = 0
        self.by_type: dict[str, int] = {}
        self.reachable = 0
        self.unreachable = 0
        self.dead_ends = 0
        self.cycles = 0

    def add_scope(
        self,
        graph: ReachabilityGraph,
        report: ReachabilityReport | None,
        loops: list[list[str]] | None,
    ) -> None:
        nodes = graph.nodes
        self.total += len(nodes)
        for element in graph.iter_elements():
            self.by_type[element.type] = self.by_type.get(element.type, 0) + 1

        if report is None:
            # Analysis failed; nothing can be called reachable
            self.unreachable += len(nodes)
        else:
            self.reachable += len(report.reachable)
            self.unreachable += len(report.unreachable)

        self.dead_ends += len(graph.get_dead_end_nodes())
        self.cycles += len(loops or [])


class BpmnValidator:
    """Static validator for process definitions.

    Builds one graph per process (with nested subprocess scopes), runs the
    enabled checkers over every scope, and aggregates the diagnostics and
    statistics. Each call is independent; a validator instance holds nothing
    but its options and may be shared between threads.
    """

    def __init__(self, options: ValidationOptions | None = None):
        self.options = options or ValidationOptions()

    def enabled_checks(self) -> list[tuple[str, Check]]:
        """The checkers switched on by the options, in reporting order."""
        opts = self.options
        checks: list[tuple[str, Check]] = []

        if opts.check_reachability:
            checks.append((
                "reachability",
                lambda ctx: check_unreachable_elements(ctx.graph, ctx.deadline, ctx.reachability),
            ))
        if opts.check_dead_ends:
            checks.append(("dead_ends", lambda ctx: check_dead_ends(ctx.graph)))
        if opts.check_cycles:
            checks.append(("cycles", lambda ctx: check_cycles(ctx.graph)))
        if opts.check_gateway_consistency:
            checks.append((
                "gateway_consistency",
                lambda ctx: check_gateway_consistency(ctx.graph, ctx.deadline),
            ))
        if opts.check_event_consistency:
            checks.append(("event_consistency", lambda ctx: check_event_consistency(ctx.graph)))
        if opts.check_flow_consistency:
            checks.append(("flow_consistency", lambda ctx: check_flow_consistency(ctx.graph)))
        if opts.strict_bpmn_compliance:
            checks.append(("strict_compliance", lambda ctx: check_strict_compliance(ctx.graph)))

        return checks

    def validate(self, definitions: Definitions | dict[str, Any]) -> ValidationResult:
        """Validate every process of a definitions document.

        Args:
            definitions: Parsed Definitions, or a raw ``{definitions: ...}``
                mapping which is parsed first.

        Returns:
            ValidationResult; ``valid`` is True when no error-level issue was
            found.

        Raises:
            SchemaValidationError: If the input is not a valid IR document.
            ValidationTimeout: If the configured time budget runs out.
        """
        if isinstance(definitions, dict):
            definitions = parse_definitions_data(definitions)
        if not isinstance(definitions, Definitions):
            raise SchemaValidationError(
                f"Expected Definitions, got {type(definitions).__name__}",
                [{"loc": "definitions", "msg": "Field required", "type": "missing"}],
            )

        deadline = Deadline(self.options.timeout_ms)
        checks = self.enabled_checks()
        tally = _Tally()
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        for process in definitions.processes:
            deadline.check(f"process {process.id}")
            root = build_graph(process, deadline)

            for graph in iter_scopes(root):
                scope_result = self._validate_scope(graph, checks, deadline, tally)
                errors.extend(scope_result.errors)
                warnings.extend(scope_result.warnings)

        deadline.check("statistics")
        score = calculate_complexity_score(definitions.processes)
        complexity = check_complexity(score, self.options.max_complexity_score)
        errors.extend(complexity.errors)
        warnings.extend(complexity.warnings)

        statistics = ValidationStatistics(
            total_elements=tally.total,
            elements_by_type=tally.by_type,
            reachable_elements=tally.reachable,
            unreachable_elements=tally.unreachable,
            dead_ends=tally.dead_ends,
            cycles=tally.cycles,
            complexity_score=score,
            processes=len(definitions.processes),
        )

        logger.info(
            f"Validated {statistics.processes} process(es): {len(errors)} error(s), "
            f"{len(warnings)} warning(s) in {deadline.elapsed_ms:.1f} ms"
        )

        return ValidationResult(
            valid=not errors,
            errors=errors,
            warnings=warnings,
            statistics=statistics,
        )

    def _validate_scope(
        self,
        graph: ReachabilityGraph,
        checks: list[tuple[str, Check]],
        deadline: Deadline,
        tally: _Tally,
    ) -> CheckResult:
        result = CheckResult(scope_id=graph.scope_id)

        deadline.check("reachability analysis")
        report = self._isolated(
            "reachability_analysis", result, graph, lambda: analyze_reachability(graph, deadline)
        )
        loops = self._isolated("loop_detection", result, graph, lambda: find_loops(graph))
        tally.add_scope(graph, report, loops)

        context = ScopeContext(graph=graph, deadline=deadline, reachability=report)
        for name, check in checks:
            deadline.check(name)
            if name == "reachability" and report is None:
                # Failure already reported by the analysis step
                continue
            started = time.monotonic()
            findings = self._isolated(name, result, graph, lambda: check(context))
            if findings is not None:
                result.merge(findings)
            logger.debug(
                f"{name} on {graph.scope_id}: "
                f"{len(findings.issues) if findings else 0} issue(s) in "
                f"{(time.monotonic() - started) * 1000:.2f} ms"
            )

        return result

    @staticmethod
    def _isolated(name: str, result: CheckResult, graph: ReachabilityGraph, func):
        """Run one step; turn an unexpected failure into a diagnostic.

        ValidationTimeout is never caught here.
        """
        try:
            return func()
        except ValidationTimeout:
            raise
        except Exception as e:
            logger.warning(f"Check {name} failed on scope {graph.scope_id}: {e}", exc_info=True)
            result.add_error(
                ErrorKind.INTERNAL_CHECK_ERROR,
                f"Check {name} failed: {type(e).__name__}: {e}",
                suggestion="This is a validator bug; the other checks still ran",
            )
            return None


def validate_definitions(
    definitions: Definitions, options: ValidationOptions | None = None
) -> ValidationResult:
    """Validate a Definitions document with the given options."""
    return BpmnValidator(options).validate(definitions)


def validate_process(
    process: Process, options: ValidationOptions | None = None
) -> ValidationResult:
    """Validate a single process."""
    if not isinstance(process, Process):
        raise SchemaValidationError(
            f"Expected Process, got {type(process).__name__}",
            [{"loc": "process", "msg": "Field required", "type": "missing"}],
        )
    return validate_definitions(Definitions(processes=[process]), options)


def validate_ir(
    data: dict[str, Any], options: ValidationOptions | None = None
) -> ValidationResult:
    """Parse a raw ``{definitions: ...}`` mapping and validate it.

    Raises:
        SchemaValidationError: If the mapping is not a valid IR document.
    """
    return validate_definitions(parse_definitions_data(data), options)


def validate_file(
    path: str | Path, options: ValidationOptions | None = None
) -> ValidationResult:
    """Load and validate an IR document file.

    Args:
        path: Path to the YAML or JSON document.
        options: Validation options.

    Returns:
        ValidationResult from all enabled validators.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the document fails schema validation.
        ValidationTimeout: If the configured time budget runs out.
    """
    definitions = parse_definitions(path)
    return validate_definitions(definitions, options)
