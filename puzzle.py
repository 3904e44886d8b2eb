"""
Dollar-game rules on top of a graph of DollarNode payloads.

The front end keeps one DollarGame per board. It adds and connects nodes,
asks for a random fill at a chosen difficulty, and then lets the player give
or take dollars along edges until every node is non-negative.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from edge_list_graph import EdgeListGraph
from graph import DuplicateEdge, NotConnected
from nodes import DollarNode, EdgeId, NodeId
from stochastic.partition import RandomPartitioner

logger = logging.getLogger(__name__)

DEFAULT_MIN_AMOUNT = -5
DEFAULT_MAX_AMOUNT = 5
NOT_APPLICABLE = "N/A"


class Difficulty(Enum):
    """
    How many dollars the board holds above (or below) its genus.

    With at least genus dollars on the board the puzzle is always solvable;
    NOT_ALWAYS_POSSIBLE drops one below that.
    """

    VERY_EASY = 2
    EASY = 1
    CHALLENGING = 0
    NOT_ALWAYS_POSSIBLE = -1

    @classmethod
    def from_setting(cls, setting: str) -> "Difficulty":
        """Map a "1".."4" preference value (easiest first) to a Difficulty."""
        by_setting = {
            "1": cls.VERY_EASY,
            "2": cls.EASY,
            "3": cls.CHALLENGING,
            "4": cls.NOT_ALWAYS_POSSIBLE,
        }
        try:
            return by_setting[str(setting).strip()]
        except KeyError:
            raise ValueError(f"Unknown difficulty setting: {setting!r}") from None

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None


def distribution(values: List[int], floor: int, ceiling: int) -> List[int]:
    """
    How many of `values` landed on each integer in [floor, ceiling].

    Index 0 is floor. Values outside the range are ignored.
    """
    counts = [0] * (ceiling - floor + 1)
    for value in values:
        if floor <= value <= ceiling:
            counts[value - floor] += 1
    return counts


class DollarGame:
    """
    One puzzle board: an undirected graph of DollarNode plus the amount range
    used when randomizing.
    """

    def __init__(
        self,
        graph: Optional[EdgeListGraph[DollarNode]] = None,
        min_amount: int = DEFAULT_MIN_AMOUNT,
        max_amount: int = DEFAULT_MAX_AMOUNT,
        partitioner: Optional[RandomPartitioner] = None,
    ) -> None:
        if min_amount > max_amount:
            raise ValueError("min_amount must not exceed max_amount")
        self.graph: EdgeListGraph[DollarNode] = graph if graph is not None else EdgeListGraph()
        self.min_amount = min_amount
        self.max_amount = max_amount
        self.partitioner = partitioner or RandomPartitioner()

    # --- Building -------------------------------------------------------------

    def add_node(self, amount: int = 0) -> NodeId:
        return self.graph.add_node(DollarNode(amount=amount))

    def connect(self, start: NodeId, end: NodeId) -> EdgeId | DuplicateEdge:
        return self.graph.add_edge(start, end)

    def amount(self, node_id: NodeId) -> Optional[int]:
        node = self.graph.get_node_data(node_id)
        return None if node is None else node.amount

    # --- Board state ----------------------------------------------------------

    def count(self) -> Optional[int]:
        """Total dollars on the board; None when there are no nodes."""
        if self.graph.num_nodes() == 0:
            return None
        return sum(node.amount for node in self.graph.node_data())

    def genus_label(self) -> str:
        genus = self.graph.genus()
        if isinstance(genus, NotConnected):
            return NOT_APPLICABLE
        return str(genus)

    def is_solved(self) -> bool:
        """Solved when no node is in debt."""
        return all(node.amount >= 0 for node in self.graph.node_data())

    # --- Randomizing ----------------------------------------------------------

    def target_sum(self, difficulty: Difficulty) -> int:
        """Dollars to spread over the board: the difficulty offset plus the genus."""
        target = difficulty.value
        genus = self.graph.genus()
        if isinstance(genus, NotConnected):
            logger.debug(
                "Randomizing before the graph is connected (%d of %d nodes reached)",
                genus.reached, genus.total,
            )
        else:
            target += genus
        return target

    def randomize(self, difficulty: Difficulty) -> Optional[List[int]]:
        """
        Give every node a random amount so the board totals target_sum().

        Values are assigned in node_ids() order. Returns the values, or None
        (leaving the board untouched) when no such assignment exists.
        """
        node_ids = self.graph.node_ids()
        target = self.target_sum(difficulty)
        values = self.partitioner.find_random_set(
            target, len(node_ids), self.min_amount, self.max_amount
        )
        if values is None:
            logger.error(
                "Unable to spread %d dollars over %d nodes in [%d, %d]",
                target, len(node_ids), self.min_amount, self.max_amount,
            )
            return None

        for node_id, value in zip(node_ids, values):
            node = self.graph.get_node_data(node_id)
            if node is None:
                continue
            node.amount = value

        logger.debug(
            "Distribution over [%d, %d]: %s",
            self.min_amount, self.max_amount,
            distribution(values, self.min_amount, self.max_amount),
        )
        return values

    # --- Moves ----------------------------------------------------------------

    def give(self, node_id: NodeId) -> bool:
        """Node pays one dollar to each neighbour. False for an unknown node."""
        return self._transfer(node_id, giving=True)

    def take(self, node_id: NodeId) -> bool:
        """Node collects one dollar from each neighbour. False for an unknown node."""
        return self._transfer(node_id, giving=False)

    def _transfer(self, node_id: NodeId, giving: bool) -> bool:
        centre = self.graph.get_node_data(node_id)
        if centre is None:
            return False

        step = 1 if giving else -1
        neighbours: List[DollarNode] = []
        for neighbour_id in self.graph.adjacent_to(node_id, directed=False):
            neighbour = self.graph.get_node_data(neighbour_id)
            if neighbour is not None:
                neighbours.append(neighbour)

        for neighbour in neighbours:
            neighbour.amount += step
        centre.amount -= step * len(neighbours)

        if giving:
            centre.give_count += 1
        else:
            centre.take_count += 1
        return True
