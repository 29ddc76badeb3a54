"""Tests for loop detection."""

from flowlint.graph.builder import build_graph
from flowlint.schema.loader import parse_definitions_from_string
from flowlint.validators.base import ErrorKind
from flowlint.validators.cycles import check_cycles, find_loops


def _graph(yaml_str: str):
    return build_graph(parse_definitions_from_string(yaml_str).processes[0])


RETRY_LOOP = """
definitions:
  processes:
    - id: P
      flowElements:
        - {type: event, eventType: start, id: Start}
        - {type: task, id: Attempt}
        - {type: gateway, gatewayType: exclusive, id: Retry, default: Done}
        - {type: event, eventType: end, id: End}
      sequenceFlows:
        - {id: F1, sourceRef: Start, targetRef: Attempt}
        - {id: F2, sourceRef: Attempt, targetRef: Retry}
        - {id: Again, sourceRef: Retry, targetRef: Attempt, conditionExpression: "${failed}"}
        - {id: Done, sourceRef: Retry, targetRef: End}
"""

TRAP_LOOP = """
definitions:
  processes:
    - id: P
      flowElements:
        - {type: event, eventType: start, id: Start}
        - {type: task, id: Ping}
        - {type: task, id: Pong}
        - {type: event, eventType: end, id: End}
      sequenceFlows:
        - {id: F1, sourceRef: Start, targetRef: Ping}
        - {id: F2, sourceRef: Ping, targetRef: Pong}
        - {id: F3, sourceRef: Pong, targetRef: Ping}
"""


class TestFindLoops:
    def test_acyclic(self, minimal_graph):
        assert find_loops(minimal_graph) == []

    def test_retry_loop(self):
        assert find_loops(_graph(RETRY_LOOP)) == [["Attempt", "Retry"]]

    def test_self_loop(self):
        graph = _graph("""
definitions:
  processes:
    - id: P
      flowElements:
        - {type: task, id: Poll}
      sequenceFlows:
        - {id: F1, sourceRef: Poll, targetRef: Poll}
""")
        assert find_loops(graph) == [["Poll"]]

    def test_loops_in_element_order(self):
        graph = _graph("""
definitions:
  processes:
    - id: P
      flowElements:
        - {type: task, id: A}
        - {type: task, id: B}
        - {type: task, id: C}
        - {type: task, id: D}
      sequenceFlows:
        - {id: F1, sourceRef: D, targetRef: B}
        - {id: F2, sourceRef: B, targetRef: D}
        - {id: F3, sourceRef: C, targetRef: A}
        - {id: F4, sourceRef: A, targetRef: C}
""")
        assert find_loops(graph) == [["A", "C"], ["B", "D"]]

    def test_dangling_flows_ignored(self):
        graph = _graph("""
definitions:
  processes:
    - id: P
      flowElements:
        - {type: task, id: A}
      sequenceFlows:
        - {id: F1, sourceRef: A, targetRef: Ghost}
        - {id: F2, sourceRef: Ghost, targetRef: A}
""")
        assert find_loops(graph) == []


class TestCheckCycles:
    def test_loop_with_exit_is_fine(self):
        assert check_cycles(_graph(RETRY_LOOP)).issues == []

    def test_loop_without_exit(self):
        result = check_cycles(_graph(TRAP_LOOP))

        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.kind == ErrorKind.SEQUENCE_FLOW_CYCLE
        assert error.element_id == "Ping"
        assert error.element_type == "task"
        assert "Ping -> Pong" in error.message

    def test_exit_to_missing_element_counts_as_exit(self):
        graph = _graph("""
definitions:
  processes:
    - id: P
      flowElements:
        - {type: task, id: Poll}
      sequenceFlows:
        - {id: F1, sourceRef: Poll, targetRef: Poll}
        - {id: F2, sourceRef: Poll, targetRef: Ghost}
""")
        assert check_cycles(graph).issues == []
