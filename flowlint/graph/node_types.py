"""Node and edge type definitions for the process graph."""

from enum import Enum


class NodeType(str, Enum):
    """Types of nodes in the process graph."""

    EVENT = "event"
    TASK = "task"
    GATEWAY = "gateway"
    SUBPROCESS = "subprocess"
    DATA_OBJECT = "dataObject"


class EdgeType(str, Enum):
    """Types of edges in the process graph."""

    SEQUENCE_FLOW = "sequence_flow"
    ATTACHMENT = "attachment"  # Host activity -> boundary event
