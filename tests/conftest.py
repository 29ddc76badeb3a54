"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from flowlint.graph.builder import build_graph
from flowlint.schema.loader import parse_definitions_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def minimal_process_yaml() -> str:
    """Return a start -> task -> end process."""
    return """
definitions:
  id: Definitions_1
  processes:
    - id: Process_1
      flowElements:
        - {type: event, eventType: start, id: Start}
        - {type: task, taskType: user, id: Task}
        - {type: event, eventType: end, id: End}
      sequenceFlows:
        - {id: Flow_1, sourceRef: Start, targetRef: Task}
        - {id: Flow_2, sourceRef: Task, targetRef: End}
"""


@pytest.fixture
def nested_process_yaml() -> str:
    """Return a process whose middle step is an embedded subprocess."""
    return """
definitions:
  processes:
    - id: Outer
      flowElements:
        - {type: event, eventType: start, id: Start}
        - type: subprocess
          id: Sub
          flowElements:
            - {type: event, eventType: start, id: SubStart}
            - {type: task, taskType: script, id: SubTask}
            - {type: event, eventType: end, id: SubEnd}
          sequenceFlows:
            - {id: Sub_1, sourceRef: SubStart, targetRef: SubTask}
            - {id: Sub_2, sourceRef: SubTask, targetRef: SubEnd}
        - {type: event, eventType: end, id: End}
      sequenceFlows:
        - {id: Flow_1, sourceRef: Start, targetRef: Sub}
        - {id: Flow_2, sourceRef: Sub, targetRef: End}
"""


@pytest.fixture
def minimal_definitions(minimal_process_yaml):
    """Return the parsed minimal definitions."""
    return parse_definitions_from_string(minimal_process_yaml)


@pytest.fixture
def minimal_graph(minimal_definitions):
    """Return the graph of the minimal process."""
    return build_graph(minimal_definitions.processes[0])


@pytest.fixture
def nested_definitions(nested_process_yaml):
    """Return the parsed nested definitions."""
    return parse_definitions_from_string(nested_process_yaml)


@pytest.fixture
def nested_graph(nested_definitions):
    """Return the graph of the nested process."""
    return build_graph(nested_definitions.processes[0])
