"""
Shared fixtures for Elevens tests.
Boards are built from decks whose order is arranged by hand.
"""

import pytest
from elevens.board import Board
from elevens.card import Card
from elevens.deck import Deck
from elevens.rules import RANKS, SUITS, POINT_VALUES

VALUES = dict(zip(RANKS, POINT_VALUES))


def make_card(rank: str, suit: str = "spades") -> Card:
    return Card(rank, suit, VALUES[rank])


def make_cards(ranks, suit: str = "spades"):
    return [make_card(rank, suit) for rank in ranks]


@pytest.fixture
def board_factory():
    """Build a board dealt from `slots`, followed by `deck` in that order."""
    def build(slots, deck=(), **kwargs):
        arranged = Deck(RANKS, SUITS, POINT_VALUES)
        arranged.cards = make_cards(slots) + make_cards(deck, "hearts")
        return Board(deck=arranged, **kwargs)
    return build


@pytest.fixture
def scenario_board(board_factory):
    return board_factory(
        ["ace", "king", "10", "jack", "queen", "5", "6", "2", "9"],
        deck=["3", "4"],
    )
