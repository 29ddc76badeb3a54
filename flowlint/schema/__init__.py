"""Schema layer for parsing process IR documents."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import (
    DataObject,
    Definitions,
    Event,
    EventDefinition,
    EventType,
    FlowElement,
    FlowScope,
    Gateway,
    GatewayType,
    Process,
    ProcessDocument,
    SequenceFlow,
    SubProcess,
    SubProcessType,
    Task,
    TaskType,
)
from .loader import (
    load_yaml,
    parse_definitions,
    parse_definitions_data,
    parse_definitions_from_string,
)

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "DataObject",
    "Definitions",
    "Event",
    "EventDefinition",
    "EventType",
    "FlowElement",
    "FlowScope",
    "Gateway",
    "GatewayType",
    "Process",
    "ProcessDocument",
    "SequenceFlow",
    "SubProcess",
    "SubProcessType",
    "Task",
    "TaskType",
    "load_yaml",
    "parse_definitions",
    "parse_definitions_data",
    "parse_definitions_from_string",
]
