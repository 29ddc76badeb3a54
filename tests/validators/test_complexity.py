"""Tests for the complexity metric."""

from flowlint.schema.loader import parse_definitions, parse_definitions_from_string
from flowlint.validators.base import ErrorKind
from flowlint.validators.complexity import (
    calculate_complexity_score,
    check_complexity,
    process_complexity_tenths,
)

THREE_ELEMENTS = """
definitions:
  processes:
    - id: P
      flowElements:
        - {type: event, eventType: start, id: Start}
        - {type: task, id: Task}
        - {type: gateway, gatewayType: exclusive, id: G}
      sequenceFlows:
        - {id: F1, sourceRef: Start, targetRef: Task}
        - {id: F2, sourceRef: Task, targetRef: G}
"""


class TestComplexityScore:
    def test_event_task_gateway(self):
        process = parse_definitions_from_string(THREE_ELEMENTS).processes[0]

        # 0.5 * 3 + 2 * 1 + 1 * 1 + 0.3 * 2 = 5.1
        assert process_complexity_tenths(process) == 51
        assert calculate_complexity_score([process]) == 5

    def test_empty(self):
        assert calculate_complexity_score([]) == 0

    def test_half_rounds_up(self):
        process = parse_definitions_from_string("""
definitions:
  processes:
    - id: P
      flowElements:
        - {type: task, id: A}
""").processes[0]
        # 0.5 rounds to 1
        assert calculate_complexity_score([process]) == 1

    def test_sums_processes_before_rounding(self):
        definitions = parse_definitions_from_string("""
definitions:
  processes:
    - id: P1
      flowElements:
        - {type: task, id: A}
    - id: P2
      flowElements:
        - {type: task, id: A}
        - {type: task, id: B}
""")
        # 0.5 + 1.0 = 1.5
        assert calculate_complexity_score(definitions.processes) == 2

    def test_nested_elements_not_counted(self, nested_definitions):
        # Start, Sub, End (2 events) and two flows: 1.5 + 2 + 0.6 = 4.1
        assert calculate_complexity_score(nested_definitions.processes) == 4

    def test_order_process(self, examples_dir):
        definitions = parse_definitions(examples_dir / "order_process.yaml")
        assert calculate_complexity_score(definitions.processes) == 22


class TestCheckComplexity:
    def test_under_threshold(self):
        assert check_complexity(5, 50).issues == []

    def test_at_threshold(self):
        assert check_complexity(50, 50).issues == []

    def test_over_threshold_warns(self):
        result = check_complexity(51, 50)

        assert result.errors == []
        assert len(result.warnings) == 1
        assert result.warnings[0].kind == ErrorKind.COMPLEXITY_EXCEEDED
        assert "51" in result.warnings[0].message

    def test_disabled(self):
        assert check_complexity(10_000, None).issues == []
