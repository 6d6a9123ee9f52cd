"""
Rules module for Elevens.
Contains game constants, the legality rules interface and group discovery.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING
from elevens.card import FACE_RANKS

if TYPE_CHECKING:
    from elevens.board import Board


# Game constants
BOARD_SIZE = 9
PAIR_TARGET = 11

RANKS = ("ace", "2", "3", "4", "5", "6", "7", "8", "9", "10", "jack", "queen", "king")
SUITS = ("spades", "hearts", "diamonds", "clubs")
POINT_VALUES = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 0, 0, 0)

PAIR_PLAY = "11-Pair"
TRIPLET_PLAY = "JQK-Triplet"


@dataclass(frozen=True)
class Play:
    """A group of board slots found by the rules."""
    indices: Tuple[int, ...]
    name: str


class LegalityRules(ABC):
    """Abstract interface for the per-game rules a Board is composed with."""

    board_size: int
    ranks: Sequence[str]
    suits: Sequence[str]
    point_values: Sequence[int]

    @abstractmethod
    def is_legal(self, board: 'Board', selected: Sequence[int]) -> bool:
        """
        Determine if the selected slots form a valid group for removal.

        Args:
            board: Board the indices refer to
            selected: Indices of the selected slots

        Returns:
            True if the selection may be removed
        """
        pass

    @abstractmethod
    def another_play_is_possible(self, board: 'Board') -> bool:
        """Determine if any legal play is left on the board."""
        pass

    @abstractmethod
    def find_play(self, board: 'Board') -> Optional[Play]:
        """
        Search the whole board for a play.

        Returns:
            The play to make, or None if there is none
        """
        pass


def find_pair_sum_11(board: 'Board', selected: Sequence[int]) -> List[int]:
    """
    Look for an 11-pair among the selected slots.

    The first pair found in scan order wins: each index is paired with
    the indices after it, in the order given.

    Args:
        board: Board to search
        selected: Indices of occupied slots to search

    Returns:
        The two indices of an 11-pair, or an empty list if none was found
    """
    for pos, k1 in enumerate(selected):
        for k2 in selected[pos + 1:]:
            if board.card_at(k1).point_value + board.card_at(k2).point_value == PAIR_TARGET:
                return [k1, k2]
    return []


def find_jqk(board: 'Board', selected: Sequence[int]) -> List[int]:
    """
    Look for a jack, queen and king among the selected slots.

    Args:
        board: Board to search
        selected: Indices of occupied slots to search

    Returns:
        [jack_index, queen_index, king_index], or an empty list if any
        of the three ranks is missing
    """
    found = dict.fromkeys(FACE_RANKS)
    for k in selected:
        card = board.card_at(k)
        # Later occurrences overwrite earlier ones
        if card.is_face():
            found[card.rank] = k

    if None in found.values():
        return []
    return [found["jack"], found["queen"], found["king"]]


def is_valid_selection(board: 'Board', selected: Sequence[int]) -> bool:
    """
    Check that a selection only names distinct, occupied slots.

    Args:
        board: Board the indices refer to
        selected: Indices to check

    Returns:
        True if every index is in range, occupied and unique
    """
    if len(set(selected)) != len(selected):
        return False
    for k in selected:
        if not 0 <= k < board.size() or board.card_at(k) is None:
            return False
    return True


class ElevensRules(LegalityRules):
    """
    Rules for Elevens.

    The legal groups are (1) a pair of non-face cards whose values add
    to 11, and (2) a jack, a queen and a king in some order.
    """

    board_size = BOARD_SIZE
    ranks = RANKS
    suits = SUITS
    point_values = POINT_VALUES

    def is_legal(self, board: 'Board', selected: Sequence[int]) -> bool:
        selected = list(selected)
        if not is_valid_selection(board, selected):
            return False

        if len(selected) == 2:
            return len(find_pair_sum_11(board, selected)) > 0
        elif len(selected) == 3:
            return len(find_jqk(board, selected)) > 0
        else:
            return False

    def another_play_is_possible(self, board: 'Board') -> bool:
        indexes = board.card_indexes()
        return len(find_pair_sum_11(board, indexes)) > 0 or len(find_jqk(board, indexes)) > 0

    def find_play(self, board: 'Board') -> Optional[Play]:
        """Pairs are tried before triplets."""
        indexes = board.card_indexes()

        pair = find_pair_sum_11(board, indexes)
        if pair:
            return Play(tuple(pair), PAIR_PLAY)

        triplet = find_jqk(board, indexes)
        if triplet:
            return Play(tuple(triplet), TRIPLET_PLAY)

        return None
