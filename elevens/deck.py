"""
Deck module for Elevens.
Handles deck creation from rank/suit/value tables, shuffling and dealing.
"""

import random
from typing import List, Optional, Sequence
from .card import Card, create_cards


class Deck:
    """Manages an ordered deck of cards with shuffling and dealing capabilities."""

    def __init__(self, ranks: Sequence[str], suits: Sequence[str],
                 point_values: Sequence[int]):
        self.ranks = list(ranks)
        self.suits = list(suits)
        self.point_values = list(point_values)
        self.cards: List[Card] = create_cards(self.ranks, self.suits, self.point_values)
        self.dealt: List[Card] = []
        self.shuffle()

    def shuffle(self):
        """Shuffle the undealt cards randomly."""
        random.shuffle(self.cards)

    def deal(self) -> Optional[Card]:
        """
        Deal the card at the front of the deck.

        Returns:
            The dealt card, or None if the deck is exhausted
        """
        if not self.cards:
            return None
        card = self.cards.pop(0)
        self.dealt.append(card)
        return card

    def size(self) -> int:
        """Return number of undealt cards."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self.cards) == 0

    def reset(self):
        """Return every card to the deck and shuffle."""
        self.cards = create_cards(self.ranks, self.suits, self.point_values)
        self.dealt = []
        self.shuffle()

    def __len__(self):
        return len(self.cards)

    def __str__(self):
        lines = [f"size = {self.size()}", "", "Undealt cards:"]
        lines.extend(f"  {card}" for card in self.cards)
        lines.append("")
        lines.append("Dealt cards:")
        lines.extend(f"  {card}" for card in self.dealt)
        return "\n".join(lines)
