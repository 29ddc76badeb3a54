"""Graph layer for representing process scopes as networkx graphs."""

from .node_types import NodeType, EdgeType
from .process_graph import ReachabilityGraph, iter_scopes
from .builder import build_graph

__all__ = [
    "NodeType",
    "EdgeType",
    "ReachabilityGraph",
    "iter_scopes",
    "build_graph",
]
