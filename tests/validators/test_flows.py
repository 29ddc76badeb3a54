"""Tests for sequence flow reference validator."""

from flowlint.graph.builder import build_graph
from flowlint.schema.loader import parse_definitions_from_string
from flowlint.validators.base import ErrorKind
from flowlint.validators.flows import check_flow_consistency


def _graph(yaml_str: str):
    return build_graph(parse_definitions_from_string(yaml_str).processes[0])


class TestFlowConsistency:
    def test_all_references_resolve(self, minimal_graph):
        assert check_flow_consistency(minimal_graph).issues == []

    def test_missing_target(self):
        graph = _graph("""
definitions:
  processes:
    - id: P
      flowElements:
        - {type: event, eventType: start, id: Start}
      sequenceFlows:
        - {id: Flow_Ghost, sourceRef: Start, targetRef: Ghost}
""")
        result = check_flow_consistency(graph)

        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.kind == ErrorKind.SEQUENCE_FLOW_INVALID_TARGET
        assert error.element_id == "Flow_Ghost"
        assert error.element_type == "sequenceFlow"
        assert "Ghost" in error.message

    def test_both_ends_missing_gives_two_errors(self):
        graph = _graph("""
definitions:
  processes:
    - id: P
      sequenceFlows:
        - {id: F1, sourceRef: Nowhere, targetRef: Ghost}
""")
        result = check_flow_consistency(graph)

        assert len(result.errors) == 2
        assert "source Nowhere" in result.errors[0].message
        assert "target Ghost" in result.errors[1].message
        assert {e.element_id for e in result.errors} == {"F1"}

    def test_reference_into_subprocess_is_invalid(self):
        graph = _graph("""
definitions:
  processes:
    - id: P
      flowElements:
        - {type: event, eventType: start, id: Start}
        - type: subprocess
          id: Sub
          flowElements:
            - {type: task, id: Inner}
      sequenceFlows:
        - {id: Flow_In, sourceRef: Start, targetRef: Inner}
""")
        result = check_flow_consistency(graph)

        assert [e.element_id for e in result.errors] == ["Flow_In"]
