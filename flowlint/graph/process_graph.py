"""ReachabilityGraph wrapper around networkx for one process scope."""

from typing import TYPE_CHECKING, Any, Iterator

import networkx as nx

from ..schema.models import (
    Event,
    EventType,
    FlowElement,
    Gateway,
    SequenceFlow,
)
from .node_types import EdgeType, NodeType

if TYPE_CHECKING:
    from ..validators.deadline import Deadline


_NODE_TYPES = {
    "event": NodeType.EVENT,
    "task": NodeType.TASK,
    "gateway": NodeType.GATEWAY,
    "subprocess": NodeType.SUBPROCESS,
    "dataObject": NodeType.DATA_OBJECT,
}


class ReachabilityGraph:
    """A graph representation of a single process or subprocess scope.

    Wraps a networkx MultiDiGraph keyed by element id. Every sequence flow is
    its own edge (keyed by flow id), so parallel flows between the same pair of
    elements keep their own condition. Flow endpoints that do not name a
    declared element are kept as *dangling* nodes: they take part in degree
    counts but are never reported as members of the scope.

    Nested subprocess scopes are separate ReachabilityGraph instances stored in
    ``nested``; the subprocess itself is a single node of this graph.
    """

    def __init__(self, scope_id: str, parent_id: str | None = None):
        """Initialize an empty scope graph."""
        self.scope_id = scope_id
        self.parent_id = parent_id
        self.nested: dict[str, "ReachabilityGraph"] = {}
        self._graph = nx.MultiDiGraph()
        self._nodes: list[str] = []
        self._start_nodes: list[str] = []
        self._end_nodes: list[str] = []
        self._flows: list[SequenceFlow] = []
        self._outgoing: dict[str, list[SequenceFlow]] = {}
        self._incoming: dict[str, list[SequenceFlow]] = {}

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_element(self, element: FlowElement) -> str:
        """Add a declared flow element as a node.

        Start and end events are classified as they are added.
        """
        node_id = element.id
        self._graph.add_node(
            node_id,
            node_type=_NODE_TYPES[element.type],
            element=element,
            declared=True,
        )
        self._nodes.append(node_id)

        if isinstance(element, Event):
            if element.event_type == EventType.START:
                self._start_nodes.append(node_id)
            elif element.event_type == EventType.END:
                self._end_nodes.append(node_id)

        return node_id

    def add_sequence_flow(self, flow: SequenceFlow) -> None:
        """Add a sequence flow edge, keeping unresolved endpoints as dangling nodes."""
        for endpoint in (flow.source_ref, flow.target_ref):
            if not self._graph.has_node(endpoint):
                self._graph.add_node(endpoint, declared=False)

        self._graph.add_edge(
            flow.source_ref,
            flow.target_ref,
            key=flow.id,
            edge_type=EdgeType.SEQUENCE_FLOW,
            flow=flow,
        )
        self._flows.append(flow)
        self._outgoing.setdefault(flow.source_ref, []).append(flow)
        self._incoming.setdefault(flow.target_ref, []).append(flow)

    def add_attachment(self, host_id: str, boundary_id: str) -> None:
        """Link a boundary event to the activity it is attached to."""
        self._graph.add_edge(
            host_id,
            boundary_id,
            key=f"attachment:{boundary_id}",
            edge_type=EdgeType.ATTACHMENT,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[str]:
        """Declared element ids, in element order."""
        return list(self._nodes)

    @property
    def start_nodes(self) -> list[str]:
        return list(self._start_nodes)

    @property
    def end_nodes(self) -> list[str]:
        return list(self._end_nodes)

    @property
    def flows(self) -> list[SequenceFlow]:
        """Sequence flows of the scope, in input order."""
        return list(self._flows)

    @property
    def edges(self) -> dict[str, set[str]]:
        """Sequence-flow adjacency keyed by source id."""
        adjacency: dict[str, set[str]] = {}
        for flow in self._flows:
            adjacency.setdefault(flow.source_ref, set()).add(flow.target_ref)
        return adjacency

    def has_node(self, node_id: str) -> bool:
        """Check whether an id names a declared element of this scope."""
        return (
            self._graph.has_node(node_id)
            and self._graph.nodes[node_id].get("declared", False)
        )

    def get_element(self, node_id: str) -> FlowElement | None:
        if not self.has_node(node_id):
            return None
        return self._graph.nodes[node_id]["element"]

    def get_node_type(self, node_id: str) -> NodeType | None:
        if not self.has_node(node_id):
            return None
        return self._graph.nodes[node_id]["node_type"]

    def iter_elements(self) -> Iterator[FlowElement]:
        """Iterate over declared elements in element order."""
        for node_id in self._nodes:
            yield self._graph.nodes[node_id]["element"]

    def get_gateways(self) -> list[Gateway]:
        return [e for e in self.iter_elements() if isinstance(e, Gateway)]

    def get_events(self) -> list[Event]:
        return [e for e in self.iter_elements() if isinstance(e, Event)]

    def is_end_event(self, node_id: str) -> bool:
        return node_id in self._end_nodes

    def outgoing_flows(self, node_id: str) -> list[SequenceFlow]:
        """Sequence flows leaving a node, in input order."""
        return list(self._outgoing.get(node_id, []))

    def incoming_flows(self, node_id: str) -> list[SequenceFlow]:
        """Sequence flows entering a node, in input order."""
        return list(self._incoming.get(node_id, []))

    def out_degree(self, node_id: str) -> int:
        return len(self._outgoing.get(node_id, []))

    def in_degree(self, node_id: str) -> int:
        return len(self._incoming.get(node_id, []))

    def default_flow_id(self, gateway: Gateway) -> str | None:
        """Id of the gateway's default flow.

        The gateway's own ``default`` wins; otherwise the first outgoing flow
        flagged ``isDefault``.
        """
        if gateway.default_flow:
            return gateway.default_flow
        for flow in self.outgoing_flows(gateway.id):
            if flow.is_default:
                return flow.id
        return None

    def successors(self, node_id: str) -> list[str]:
        """Distinct sequence-flow targets of a node, in flow order."""
        return list(dict.fromkeys(f.target_ref for f in self.outgoing_flows(node_id)))

    def get_reachable_nodes(self, deadline: "Deadline | None" = None) -> set[str]:
        """Get all declared nodes reachable from a start event.

        Depth-first with an explicit stack, seeded from every start event and
        following sequence flows and boundary attachments.

        Args:
            deadline: Optional deadline checked inside the traversal loop.

        Returns:
            Set of reachable element ids.
        """
        visited: set[str] = set()
        stack = list(reversed(self._start_nodes))

        while stack:
            if deadline is not None:
                deadline.tick("reachability traversal")

            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)

            for _, target in self._graph.out_edges(current):
                if target not in visited:
                    stack.append(target)

        return {node_id for node_id in visited if self.has_node(node_id)}

    def get_dead_end_nodes(self) -> list[str]:
        """Declared non-end nodes with no outgoing sequence flow, in element order."""
        return [
            node_id
            for node_id in self._nodes
            if not self.is_end_event(node_id) and self.out_degree(node_id) == 0
        ]

    def flow_graph(self) -> nx.DiGraph:
        """A simple DiGraph of the sequence flows between declared elements."""
        simple = nx.DiGraph()
        simple.add_nodes_from(self._nodes)
        for flow in self._flows:
            if self.has_node(flow.source_ref) and self.has_node(flow.target_ref):
                simple.add_edge(flow.source_ref, flow.target_ref)
        return simple

    def describe(self) -> dict[str, Any]:
        """Summary counts for logging."""
        return {
            "scope": self.scope_id,
            "nodes": len(self._nodes),
            "flows": len(self._flows),
            "start_nodes": len(self._start_nodes),
            "end_nodes": len(self._end_nodes),
            "nested": len(self.nested),
        }


def iter_scopes(root: ReachabilityGraph) -> Iterator[ReachabilityGraph]:
    """Iterate over a scope graph and all nested scopes in pre-order."""
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(current.nested.values())))
