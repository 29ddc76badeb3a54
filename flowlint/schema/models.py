"""Pydantic models for the process intermediate representation (IR).

The IR mirrors the shape produced by the process builder/importer:

    definitions:
      id: Definitions_1
      processes:
        - id: Order
          flowElements: [...]
          sequenceFlows: [...]

Flow elements and event definitions are closed variant sets discriminated by
their ``type`` field. Keys are camelCase on the wire and snake_case in Python.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class IRModel(BaseModel):
    """Base for all IR models: immutable, camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class EventType(str, Enum):
    """Position of an event in the flow."""

    START = "start"
    END = "end"
    INTERMEDIATE = "intermediate"
    BOUNDARY = "boundary"


class TaskType(str, Enum):
    """Task subtypes."""

    SERVICE = "service"
    USER = "user"
    MANUAL = "manual"
    SCRIPT = "script"
    BUSINESS_RULE = "businessRule"
    SEND = "send"
    RECEIVE = "receive"
    CALL_ACTIVITY = "callActivity"


class GatewayType(str, Enum):
    """Gateway routing behaviours."""

    EXCLUSIVE = "exclusive"
    INCLUSIVE = "inclusive"
    PARALLEL = "parallel"
    EVENT_BASED = "eventBased"
    COMPLEX = "complex"


class SubProcessType(str, Enum):
    """Subprocess flavours."""

    EMBEDDED = "embedded"
    EVENT = "event"
    TRANSACTION = "transaction"
    AD_HOC = "adHoc"


# -----------------------------------------------------------------------------
# Event definitions
# -----------------------------------------------------------------------------


class MessageEventDefinition(IRModel):
    type: Literal["message"] = "message"
    message_ref: str | None = None
    operation_ref: str | None = None


class TimerEventDefinition(IRModel):
    type: Literal["timer"] = "timer"
    time_date: str | None = None
    time_cycle: str | None = None
    time_duration: str | None = None


class SignalEventDefinition(IRModel):
    type: Literal["signal"] = "signal"
    signal_ref: str | None = None


class ErrorEventDefinition(IRModel):
    type: Literal["error"] = "error"
    error_ref: str | None = None


class EscalationEventDefinition(IRModel):
    type: Literal["escalation"] = "escalation"
    escalation_ref: str | None = None


class CancelEventDefinition(IRModel):
    type: Literal["cancel"] = "cancel"


class CompensationEventDefinition(IRModel):
    type: Literal["compensation"] = "compensation"
    wait_for_completion: bool | None = None
    activity_ref: str | None = None


class ConditionalEventDefinition(IRModel):
    type: Literal["conditional"] = "conditional"
    condition: str


class LinkEventDefinition(IRModel):
    type: Literal["link"] = "link"
    name: str | None = None
    source: str | None = None
    target: str | None = None


class TerminateEventDefinition(IRModel):
    type: Literal["terminate"] = "terminate"


class MultipleEventDefinition(IRModel):
    type: Literal["multiple"] = "multiple"


class ParallelMultipleEventDefinition(IRModel):
    type: Literal["parallelMultiple"] = "parallelMultiple"


EventDefinition = Annotated[
    Union[
        MessageEventDefinition,
        TimerEventDefinition,
        SignalEventDefinition,
        ErrorEventDefinition,
        EscalationEventDefinition,
        CancelEventDefinition,
        CompensationEventDefinition,
        ConditionalEventDefinition,
        LinkEventDefinition,
        TerminateEventDefinition,
        MultipleEventDefinition,
        ParallelMultipleEventDefinition,
    ],
    Field(discriminator="type"),
]


# -----------------------------------------------------------------------------
# Flow elements
# -----------------------------------------------------------------------------


class SequenceFlow(IRModel):
    """A directed, optionally guarded edge between two flow elements."""

    id: str = Field(min_length=1)
    name: str | None = None
    source_ref: str
    target_ref: str
    condition_expression: str | None = None
    is_default: bool | None = None
    is_immediate: bool | None = None

    @property
    def has_condition(self) -> bool:
        """Whether the flow carries a non-empty guard expression."""
        return bool(self.condition_expression)


class Event(IRModel):
    """A start, end, intermediate or boundary event."""

    type: Literal["event"] = "event"
    id: str = Field(min_length=1)
    name: str | None = None
    event_type: EventType
    event_definitions: list[EventDefinition] | None = None
    attached_to_ref: str | None = None
    cancel_activity: bool = True


class Task(IRModel):
    """An activity. Subtype-specific fields are carried but not interpreted."""

    type: Literal["task"] = "task"
    id: str = Field(min_length=1)
    name: str | None = None
    task_type: TaskType | None = None
    implementation: str | None = None
    assignee: str | None = None
    candidate_users: str | None = None
    candidate_groups: str | None = None
    form_key: str | None = None
    called_element: str | None = None
    script: str | None = None
    topic: str | None = None
    decision_ref: str | None = None
    result_variable: str | None = None
    message_ref: str | None = None


class Gateway(IRModel):
    """A branching or merging control-flow node."""

    type: Literal["gateway"] = "gateway"
    id: str = Field(min_length=1)
    name: str | None = None
    gateway_type: GatewayType
    default_flow: str | None = Field(default=None, alias="default")
    instantiate: bool | None = None
    activation_condition: str | None = None


class DataObject(IRModel):
    """A data object declared in the scope."""

    type: Literal["dataObject"] = "dataObject"
    id: str = Field(min_length=1)
    name: str | None = None
    is_collection: bool = False


class FlowScope(IRModel):
    """Shared body of a process or subprocess: its own graph scope."""

    flow_elements: list["FlowElement"] = Field(default_factory=list)
    sequence_flows: list[SequenceFlow] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "FlowScope":
        """Element ids and flow ids must each be unique within the scope."""
        _reject_duplicates("flow element", (e.id for e in self.flow_elements))
        _reject_duplicates("sequence flow", (f.id for f in self.sequence_flows))
        return self

    def get_element(self, element_id: str) -> "FlowElement | None":
        """Get a top-level element by id."""
        for element in self.flow_elements:
            if element.id == element_id:
                return element
        return None

    def events(self) -> list[Event]:
        return [e for e in self.flow_elements if isinstance(e, Event)]

    def gateways(self) -> list[Gateway]:
        return [e for e in self.flow_elements if isinstance(e, Gateway)]

    def subprocesses(self) -> list["SubProcess"]:
        return [e for e in self.flow_elements if isinstance(e, SubProcess)]


class SubProcess(FlowScope):
    """A nested scope that appears as a single node in its parent."""

    type: Literal["subprocess"] = "subprocess"
    id: str = Field(min_length=1)
    name: str | None = None
    sub_process_type: SubProcessType = SubProcessType.EMBEDDED
    triggered_by_event: bool = False
    completion_condition: str | None = None


FlowElement = Annotated[
    Union[Event, Task, Gateway, SubProcess, DataObject],
    Field(discriminator="type"),
]


class Process(FlowScope):
    """An executable process: the top-level graph scope."""

    id: str = Field(min_length=1)
    name: str | None = None
    is_executable: bool = True


class Definitions(IRModel):
    """Top-level container of processes."""

    id: str | None = None
    name: str | None = None
    target_namespace: str | None = None
    processes: list[Process]

    @model_validator(mode="after")
    def check_unique_process_ids(self) -> "Definitions":
        _reject_duplicates("process", (p.id for p in self.processes))
        return self


class ProcessDocument(IRModel):
    """Root of an IR document: ``{definitions: {...}}``."""

    definitions: Definitions


def _reject_duplicates(label: str, ids) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"Duplicate {label} id '{item_id}'")
        seen.add(item_id)


FlowScope.model_rebuild()
SubProcess.model_rebuild()
Process.model_rebuild()
Definitions.model_rebuild()
ProcessDocument.model_rebuild()
