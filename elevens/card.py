"""
Card module for Elevens.
Defines the Card value type: rank, suit and point value.
"""

from typing import List, Sequence


FACE_RANKS = ("jack", "queen", "king")


class Card:
    """Represents a playing card with rank, suit and point value."""

    __slots__ = ("_rank", "_suit", "_point_value")

    def __init__(self, rank: str, suit: str, point_value: int):
        self._rank = rank
        self._suit = suit
        self._point_value = point_value

    @property
    def rank(self) -> str:
        return self._rank

    @property
    def suit(self) -> str:
        return self._suit

    @property
    def point_value(self) -> int:
        return self._point_value

    def is_face(self) -> bool:
        """True for jacks, queens and kings."""
        return self._rank in FACE_RANKS

    def matches(self, other: 'Card') -> bool:
        """
        Check whether two cards are the same card.

        Args:
            other: The card to compare against

        Returns:
            True if rank and suit are equal (point value is ignored)
        """
        return self._rank == other.rank and self._suit == other.suit

    def __str__(self):
        return f"{self._rank} of {self._suit} (point value = {self._point_value})"

    def __repr__(self):
        return f"Card({self._rank!r}, {self._suit!r}, {self._point_value})"

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self.matches(other)

    def __hash__(self):
        return hash((self._rank, self._suit))


def create_cards(ranks: Sequence[str], suits: Sequence[str],
                 point_values: Sequence[int]) -> List[Card]:
    """
    Create one card per rank x suit combination.

    Args:
        ranks: Rank names
        suits: Suit names
        point_values: Point value for each rank, parallel to ``ranks``

    Returns:
        Unshuffled list of cards, grouped by suit

    Raises:
        ValueError: If ranks and point values differ in length
    """
    if len(ranks) != len(point_values):
        raise ValueError(
            f"Got {len(ranks)} ranks but {len(point_values)} point values"
        )

    cards = []
    for suit in suits:
        for rank, value in zip(ranks, point_values):
            cards.append(Card(rank, suit, value))
    return cards
