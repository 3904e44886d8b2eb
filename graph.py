"""
Graph abstraction for the dollar game.

Nodes are NodeId -> payload entries. Edges join two node ids and carry an
integer weight. A graph is either directed or undirected for its whole life.

Connectivity and genus are defined here on top of the abstract queries so
every concrete graph shares one traversal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Optional, Set, TypeVar

from nodes import EdgeId, NodeId

T = TypeVar("T")


@dataclass(frozen=True)
class Edge:
    """
    Connection between two nodes.

    For undirected graphs start and end are interchangeable; the stored order
    is whatever the caller used when adding the edge.
    """

    start: NodeId
    end: NodeId
    weight: int = 0

    def touches(self, node_id: NodeId) -> bool:
        return self.start == node_id or self.end == node_id

    def joins(self, start: NodeId, end: NodeId, directed: bool) -> bool:
        """True if this edge connects start to end under the given directedness."""
        if self.start == start and self.end == end:
            return True
        return not directed and self.start == end and self.end == start


@dataclass(frozen=True)
class DuplicateEdge:
    """
    Returned by add_edge when the two endpoints are already joined.
    """

    start: NodeId
    end: NodeId
    existing: EdgeId


@dataclass(frozen=True)
class NotConnected:
    """
    Returned by genus() for a graph that is not (weakly) connected.

    reached: nodes found by the traversal; total: nodes in the graph.
    """

    reached: int
    total: int


class Graph(ABC, Generic[T]):
    """Directed or undirected graph over integer node ids."""

    @property
    @abstractmethod
    def directed(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def node_ids(self) -> List[NodeId]:
        """Return a copy of all node ids."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> List[Edge]:
        """Return a copy of all edges."""
        raise NotImplementedError

    @abstractmethod
    def adjacent_to(self, node_id: NodeId, directed: Optional[bool] = None) -> List[NodeId]:
        """
        Ids of the nodes sharing an edge with node_id.

        directed=None uses the graph's own directedness. When directed, only
        outgoing edges (start == node_id) count.
        """
        raise NotImplementedError

    def num_nodes(self) -> int:
        return len(self.node_ids())

    def num_edges(self) -> int:
        return len(self.edges())

    # --- Connectivity ---------------------------------------------------------

    def _reachable_count(self) -> int:
        """
        Depth-first traversal from an arbitrary node, treating every edge as
        undirected. Uses an explicit stack so large graphs don't hit the
        recursion limit.
        """
        ids = self.node_ids()
        if not ids:
            return 0

        known = set(ids)
        visited: Set[NodeId] = set()
        stack = [ids[0]]
        while stack:
            node_id = stack.pop()
            if node_id in visited:
                continue
            visited.add(node_id)
            for neighbour in self.adjacent_to(node_id, directed=False):
                # edges may name ids that were never added as nodes
                if neighbour in known and neighbour not in visited:
                    stack.append(neighbour)
        return len(visited)

    def is_connected(self) -> bool:
        """
        True if every node can reach every other node (weak connectivity for
        directed graphs).

        A graph with no nodes or no edges is never connected, not even a
        single isolated node.
        """
        if self.num_nodes() == 0 or self.num_edges() == 0:
            return False
        return self._reachable_count() == self.num_nodes()

    def genus(self) -> int | NotConnected:
        """
        edges - nodes + 1 for a connected graph.

        Returns NotConnected instead of a number when the graph is not
        connected; callers are expected to branch on it.
        """
        total = self.num_nodes()
        if total == 0 or self.num_edges() == 0:
            return NotConnected(reached=min(total, 1), total=total)

        reached = self._reachable_count()
        if reached != total:
            return NotConnected(reached=reached, total=total)
        return self.num_edges() - total + 1
