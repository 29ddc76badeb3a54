"""Tests for schema loader."""

import pytest

from flowlint.schema.loader import (
    load_yaml,
    parse_definitions,
    parse_definitions_data,
    parse_definitions_from_string,
)
from flowlint.schema.errors import SchemaLoadError, SchemaValidationError


class TestLoadYaml:
    def test_load_valid_yaml(self, tmp_path):
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("key: value\nlist:\n  - item1\n  - item2")

        data = load_yaml(yaml_file)
        assert data["key"] == "value"
        assert data["list"] == ["item1", "item2"]

    def test_file_not_found(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml("/nonexistent/path.yaml")
        assert "not found" in str(exc_info.value).lower()
        assert exc_info.value.path == "/nonexistent/path.yaml"

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(tmp_path)
        assert "Not a file" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("key: [unclosed bracket")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "Invalid YAML" in str(exc_info.value)

    def test_empty_file_returns_empty_dict(self, tmp_path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert load_yaml(yaml_file) == {}

    def test_non_mapping_at_root(self, tmp_path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- item1\n- item2")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "mapping" in str(exc_info.value).lower()


class TestParseDefinitionsFromString:
    def test_parse_minimal(self, minimal_process_yaml):
        definitions = parse_definitions_from_string(minimal_process_yaml)

        assert definitions.id == "Definitions_1"
        assert [p.id for p in definitions.processes] == ["Process_1"]
        assert [e.id for e in definitions.processes[0].flow_elements] == ["Start", "Task", "End"]

    def test_parse_json_text(self):
        text = (
            '{"definitions": {"processes": [{"id": "P", "flowElements": '
            '[{"type": "event", "eventType": "start", "id": "S"}]}]}}'
        )
        definitions = parse_definitions_from_string(text)
        assert definitions.processes[0].flow_elements[0].id == "S"

    def test_invalid_yaml_raises_load_error(self):
        with pytest.raises(SchemaLoadError):
            parse_definitions_from_string("definitions: [unclosed")

    def test_scalar_root_raises_load_error(self):
        with pytest.raises(SchemaLoadError):
            parse_definitions_from_string("just a string")

    def test_empty_text_is_missing_definitions(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_definitions_from_string("")
        assert exc_info.value.errors[0]["loc"] == "definitions"

    def test_missing_processes(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_definitions_from_string("definitions:\n  id: D\n")
        locs = [err["loc"] for err in exc_info.value.errors]
        assert "definitions.processes" in locs

    def test_unknown_element_type(self):
        yaml_str = """
definitions:
  processes:
    - id: P
      flowElements:
        - {type: swimlane, id: X}
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_definitions_from_string(yaml_str)
        assert exc_info.value.errors

    def test_duplicate_element_ids(self):
        yaml_str = """
definitions:
  processes:
    - id: P
      flowElements:
        - {type: task, id: A}
        - {type: task, id: A}
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_definitions_from_string(yaml_str)
        assert "Duplicate flow element id 'A'" in exc_info.value.errors[0]["msg"]


class TestParseDefinitionsData:
    def test_non_mapping_input(self):
        with pytest.raises(SchemaValidationError):
            parse_definitions_data(["not", "a", "mapping"])

    def test_error_entries_have_loc_msg_type(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_definitions_data({"definitions": {"processes": [{"flowElements": []}]}})

        error = exc_info.value.errors[0]
        assert set(error) == {"loc", "msg", "type"}
        assert error["loc"] == "definitions.processes.0.id"
        assert error["type"] == "missing"


class TestParseDefinitions:
    def test_parse_example_file(self, examples_dir):
        definitions = parse_definitions(examples_dir / "order_process.yaml")

        process = definitions.processes[0]
        assert process.id == "OrderProcess"
        assert len(process.flow_elements) == 13
        assert len(process.sequence_flows) == 13

    def test_parse_json_file(self, examples_dir):
        definitions = parse_definitions(examples_dir / "minimal_valid.json")
        assert definitions.processes[0].id == "Minimal"

    def test_schema_error_from_file(self, examples_dir):
        with pytest.raises(SchemaValidationError):
            parse_definitions(examples_dir / "invalid" / "missing_processes.yaml")
