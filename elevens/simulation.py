"""
Simulation module for Elevens.
Plays many automatic games and reports how often the board is cleared.
"""

from typing import Dict, Any, List, Optional
import numpy as np
from elevens.board import Board
from elevens.game import ElevensGame
from elevens.utils import GameLogger


class ElevensSimulation:
    """Runs a batch of auto-played games."""

    def __init__(self, num_games: int, max_plays: Optional[int] = None,
                 logger: Optional[GameLogger] = None):
        if num_games < 1:
            raise ValueError(f"Need at least one game, got {num_games}")

        self.num_games = num_games
        self.max_plays = max_plays
        self.logger = logger or GameLogger()
        self.results: List[Dict[str, Any]] = []

    def play_one(self) -> Dict[str, Any]:
        """Play a single game on a freshly shuffled board."""
        board = Board()
        game = ElevensGame(board, self.logger)
        return game.play_game(self.max_plays)

    def run(self) -> Dict[str, Any]:
        """
        Play every game and aggregate the results.

        Returns:
            Dictionary with games, wins, win_rate, mean_plays and
            mean_cards_left
        """
        self.results = [self.play_one() for _ in range(self.num_games)]

        won = np.array([r['won'] for r in self.results], dtype=bool)
        plays = np.array([r['plays'] for r in self.results], dtype=np.float64)
        left = np.array([r['cards_left_on_board'] for r in self.results], dtype=np.float64)

        return {
            'games': self.num_games,
            'wins': int(won.sum()),
            'win_rate': float(won.mean()),
            'mean_plays': float(plays.mean()),
            'mean_cards_left': float(left.mean())
        }
