"""
Node identifiers and the puzzle node payload.

Graphs store nodes as NodeId -> payload; the payload type is up to the
caller. DollarNode is the payload used by the dollar game.
"""

from dataclasses import dataclass

NodeId = int
EdgeId = int


@dataclass
class DollarNode:
    """
    Dollar amount held by one node, plus how often it has given or taken.
    """

    amount: int = 0
    give_count: int = 0
    take_count: int = 0

    def __str__(self) -> str:
        return f"Node: {self.amount}"
