"""
Main game module for Elevens.
Drives a single board through player-chosen or automatic plays.
"""

from typing import Dict, Any, Optional, Sequence
from elevens.board import Board
from elevens.utils import GameLogger


class ElevensGame:
    """Game controller for one Elevens session."""

    def __init__(self, board: Optional[Board] = None,
                 logger: Optional[GameLogger] = None):
        self.board = board if board is not None else Board()
        self.logger = logger or GameLogger()
        self.plays = 0
        self.logger.log_game_start(self.board.cards, self.board.deck_size())

    def is_over(self) -> bool:
        """Check whether no further play can be made."""
        return not self.board.another_play_is_possible()

    def play_selection(self, selected: Sequence[int]) -> bool:
        """
        Remove a player-chosen group if it is legal.

        Args:
            selected: Board indices picked by the player

        Returns:
            True if the group was legal and has been replaced
        """
        selected = list(selected)
        if not self.board.is_legal(selected):
            return False

        removed = [self.board.card_at(k) for k in selected]
        self.board.replace_selected_cards(selected)
        self.plays += 1
        self.logger.log_play(selected, removed)
        self.logger.log_board(self.board.cards)
        return True

    def auto_play(self) -> bool:
        """Let the board find and make one play."""
        if not self.board.play_if_possible():
            return False
        self.plays += 1
        self.logger.log_board(self.board.cards)
        return True

    def play_game(self, max_plays: Optional[int] = None) -> Dict[str, Any]:
        """
        Auto-play until no play is left.

        Args:
            max_plays: Optional cap on the number of plays made by this call

        Returns:
            Dictionary with the outcome of the game
        """
        made = 0
        while max_plays is None or made < max_plays:
            if not self.auto_play():
                break
            made += 1

        result = self.get_result()
        self.logger.log_game_end(result['won'], result['plays'])
        return result

    def get_result(self) -> Dict[str, Any]:
        """Summarize the current state of the game."""
        return {
            'won': self.board.game_is_won(),
            'plays': self.plays,
            'cards_left_on_board': len(self.board.card_indexes()),
            'cards_left_in_deck': self.board.deck_size()
        }
