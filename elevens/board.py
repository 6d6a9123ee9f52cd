"""
Board module for Elevens.
A fixed row of card slots backed by a deck, composed with pluggable rules.
"""

import logging
from typing import List, Optional, Sequence
from elevens.card import Card
from elevens.deck import Deck
from elevens.rules import LegalityRules, ElevensRules


class InvalidSelectionError(ValueError):
    """Raised when a replacement names slots that cannot be replaced."""


class Board:
    """Fixed-size board of optional card slots, refilled from a deck."""

    def __init__(self, rules: Optional[LegalityRules] = None,
                 deck: Optional[Deck] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Create a board and deal its first cards.

        Args:
            rules: Game rules; Elevens rules if not given
            deck: Deck to deal from, used in its current order. A freshly
                shuffled deck is built from the rules' tables if not given.
            logger: Sink for play notices
        """
        self.rules = rules or ElevensRules()
        if deck is None:
            deck = Deck(self.rules.ranks, self.rules.suits, self.rules.point_values)
        self.deck = deck
        self.logger = logger or logging.getLogger(__name__)
        self.cards: List[Optional[Card]] = [None] * self.rules.board_size
        self._deal_my_cards()

    def new_game(self):
        """Reset the deck, reshuffle and deal a fresh board."""
        self.deck.reset()
        self._deal_my_cards()

    def size(self) -> int:
        """Return the number of slots."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if no slot holds a card."""
        return all(card is None for card in self.cards)

    def deck_size(self) -> int:
        """Return the number of undealt cards."""
        return self.deck.size()

    def card_at(self, k: int) -> Optional[Card]:
        """
        Access the card in a slot.

        Args:
            k: Slot index

        Returns:
            The card, or None if the slot is empty

        Raises:
            IndexError: If k is not a slot index
        """
        if not 0 <= k < len(self.cards):
            raise IndexError(f"Slot {k} out of range (board size {len(self.cards)})")
        return self.cards[k]

    def card_indexes(self) -> List[int]:
        """Return the indices of occupied slots in ascending order."""
        return [k for k, card in enumerate(self.cards) if card is not None]

    def replace_selected_cards(self, selected: Sequence[int]):
        """
        Replace the selected cards with cards dealt from the deck.

        Slots are emptied once the deck runs out. Nothing is changed
        unless every index is valid.

        Args:
            selected: Indices of occupied slots

        Raises:
            InvalidSelectionError: If an index is out of range, repeated,
                or names an empty slot
        """
        seen = set()
        for k in selected:
            if not 0 <= k < len(self.cards):
                raise InvalidSelectionError(f"Slot {k} out of range")
            if k in seen:
                raise InvalidSelectionError(f"Slot {k} selected twice")
            if self.cards[k] is None:
                raise InvalidSelectionError(f"Slot {k} is empty")
            seen.add(k)

        for k in selected:
            self.cards[k] = self.deck.deal()

    def is_legal(self, selected: Sequence[int]) -> bool:
        """Check whether the selected slots form a legal group."""
        return self.rules.is_legal(self, selected)

    def another_play_is_possible(self) -> bool:
        """Check whether any legal group remains on the board."""
        return self.rules.another_play_is_possible(self)

    def play_if_possible(self) -> bool:
        """
        Look for a legal play on the board and make it.

        Returns:
            True if a play was found and made
        """
        play = self.rules.find_play(self)
        if play is None:
            return False

        self.replace_selected_cards(play.indices)
        self.logger.info(f"{play.name} removed.")
        return True

    def game_is_won(self) -> bool:
        """The game is won once the deck and the board are both empty."""
        return self.deck.is_empty() and self.is_empty()

    def _deal_my_cards(self):
        for k in range(len(self.cards)):
            self.cards[k] = self.deck.deal()

    def __str__(self):
        return "\n".join(f"{k}: {card}" for k, card in enumerate(self.cards))
