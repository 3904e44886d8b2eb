"""
Concrete graph implementation for the dollar game.

Nodes live in a NodeId -> payload dict and edges in a flat EdgeId -> Edge
dict. Every edge and adjacency query is a linear scan over the edges, which
is fine for a hand-built puzzle (tens of nodes) but does not scale.
"""

from __future__ import annotations

import copy
import logging
from typing import Dict, Generic, List, Optional, TypeVar

from graph import DuplicateEdge, Edge, Graph
from nodes import EdgeId, NodeId

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _smallest_unused(used: Dict[int, object]) -> int:
    candidate = 0
    while candidate in used:
        candidate += 1
    return candidate


class EdgeListGraph(Graph[T], Generic[T]):
    """
    Graph backed by a node dict and a flat edge dict.

    Node ids and edge ids are separate namespaces; both hand out the smallest
    integer not currently in use, so ids of removed entries come back.
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._nodes: Dict[NodeId, T] = {}
        self._edges: Dict[EdgeId, Edge] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    # --- Id allocation --------------------------------------------------------

    def generate_unique_node_id(self) -> NodeId:
        """Smallest non-negative integer not used by a node. O(n)."""
        return _smallest_unused(self._nodes)

    def generate_unique_edge_id(self) -> EdgeId:
        """Smallest non-negative integer not used by an edge. O(n)."""
        return _smallest_unused(self._edges)

    # --- Mutation API ---------------------------------------------------------

    def add_node(self, data: T, node_id: Optional[NodeId] = None) -> NodeId:
        """
        Store data under node_id (or a freshly generated id) and return the id.

        An explicit node_id is not checked for collisions: adding twice with
        the same id replaces the earlier payload.
        """
        if node_id is None:
            node_id = self.generate_unique_node_id()
        elif node_id in self._nodes:
            logger.debug("add_node: id %d already in use, replacing its data", node_id)

        self._nodes[node_id] = data
        return node_id

    def add_edge(self, start: NodeId, end: NodeId, weight: int = 0) -> EdgeId | DuplicateEdge:
        """
        Join start and end. Returns the new edge id, or DuplicateEdge (and
        changes nothing) if the two are already joined.
        """
        existing = self.edge_id(start, end)
        if existing is not None:
            logger.warning("Tried to add a duplicate edge (%d, %d)", start, end)
            return DuplicateEdge(start, end, existing)

        edge_id = self.generate_unique_edge_id()
        self._edges[edge_id] = Edge(start, end, weight)
        return edge_id

    def remove_node(self, node_id: NodeId) -> bool:
        """Remove a node and every edge touching it. False if there was no such node."""
        self.remove_edges_with_node(node_id)
        if node_id not in self._nodes:
            return False
        del self._nodes[node_id]
        return True

    def remove_all_nodes(self) -> None:
        self.remove_all_edges()
        self._nodes.clear()

    def remove_edges_with_node(self, node_id: NodeId) -> int:
        """Remove the edges that use node_id, keeping the node. Returns how many went."""
        doomed = [eid for eid, edge in self._edges.items() if edge.touches(node_id)]
        for eid in doomed:
            del self._edges[eid]
        return len(doomed)

    def remove_edge(self, start: NodeId, end: NodeId) -> bool:
        """Remove the edge joining start and end (either order when undirected)."""
        edge_id = self.edge_id(start, end)
        if edge_id is None:
            return False
        del self._edges[edge_id]
        return True

    def remove_all_edges(self) -> None:
        self._edges.clear()

    # --- Queries --------------------------------------------------------------

    def edge_id(self, start: NodeId, end: NodeId) -> Optional[EdgeId]:
        for eid, edge in self._edges.items():
            if edge.joins(start, end, self._directed):
                return eid
        return None

    def is_adjacent(self, start: NodeId, end: NodeId) -> bool:
        return any(edge.joins(start, end, self._directed) for edge in self._edges.values())

    def edge_from_id(self, edge_id: EdgeId) -> Optional[Edge]:
        return self._edges.get(edge_id)

    def edge_from_nodes(self, start: NodeId, end: NodeId) -> Optional[Edge]:
        edge_id = self.edge_id(start, end)
        return None if edge_id is None else self._edges[edge_id]

    def adjacent_to(self, node_id: NodeId, directed: Optional[bool] = None) -> List[NodeId]:
        if directed is None:
            directed = self._directed

        adjacent: List[NodeId] = []
        for edge in self._edges.values():
            if edge.start == node_id:
                adjacent.append(edge.end)
            elif edge.end == node_id and not directed:
                adjacent.append(edge.start)
        return adjacent

    def node_ids(self) -> List[NodeId]:
        return list(self._nodes.keys())

    def node_data(self) -> List[T]:
        """Payloads of every node, without their ids."""
        return list(self._nodes.values())

    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    def edge_ids(self) -> List[EdgeId]:
        return list(self._edges.keys())

    def get_node_data(self, node_id: NodeId) -> Optional[T]:
        return self._nodes.get(node_id)

    def find_node_id(self, data: T) -> Optional[NodeId]:
        """
        Id of the first node whose payload equals data, or None.

        "First" follows dict iteration order; with several matches any one
        of them may come back.
        """
        for node_id, value in self._nodes.items():
            if value == data:
                return node_id
        return None

    def num_nodes(self) -> int:
        return len(self._nodes)

    def num_edges(self) -> int:
        return len(self._edges)

    # --- Copying / dunder -----------------------------------------------------

    def clone(self) -> EdgeListGraph[T]:
        """Deep copy: same ids, equal payloads, nothing shared with this graph."""
        twin: EdgeListGraph[T] = EdgeListGraph(directed=self._directed)
        twin._nodes = copy.deepcopy(self._nodes)
        twin._edges = dict(self._edges)  # Edge is frozen
        return twin

    def __copy__(self) -> EdgeListGraph[T]:
        return self.clone()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __str__(self) -> str:
        node_str = "".join(f" ({nid}: {data})" for nid, data in self._nodes.items())
        edge_str = "".join(
            f" ({edge.start}, {edge.end}: {edge.weight})" for edge in self._edges.values()
        )
        return f" Nodes[{len(self._nodes)}]:{node_str}\nEdges[{len(self._edges)}]:{edge_str}"

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"EdgeListGraph({kind}, nodes={len(self._nodes)}, edges={len(self._edges)})"
