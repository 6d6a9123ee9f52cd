"""
Utility module for Elevens.
Contains logging setup and board formatting helpers.
"""

import logging
import os
from typing import Dict, Any, List, Optional
from elevens.card import Card


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO):
    """Set up logging configuration for the game."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )
    # basicConfig is a no-op once root has handlers
    logging.getLogger().setLevel(level)


def format_card(card: Optional[Card]) -> str:
    """Short form of a card, e.g. 'queen/hearts'; '--' for an empty slot."""
    if card is None:
        return "--"
    return f"{card.rank}/{card.suit}"


def format_board(cards: List[Optional[Card]]) -> str:
    """
    Format board slots for display.

    Args:
        cards: Slot contents, None for empty slots

    Returns:
        Single line of the form '0:ace/spades 1:-- ...'
    """
    return ' '.join(f"{k}:{format_card(card)}" for k, card in enumerate(cards))


def format_summary(summary: Dict[str, Any]) -> str:
    """Format simulation results for display."""
    lines = [
        f"Games played: {summary['games']}",
        f"Games won: {summary['wins']}",
        f"Win rate: {summary['win_rate']:.2%}",
        f"Mean plays per game: {summary['mean_plays']:.2f}",
        f"Mean cards left on board: {summary['mean_cards_left']:.2f}",
    ]
    return '\n'.join(lines)


class GameLogger:
    """Logging class for game events."""

    def __init__(self, log_file: Optional[str] = None, name: str = "ElevensGame",
                 level: Optional[int] = None):
        self.logger = logging.getLogger(name)
        if level is not None:
            self.logger.setLevel(level)

        if log_file and not self._has_file_handler(log_file):
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            fh = logging.FileHandler(log_file)
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

    def _has_file_handler(self, log_file: str) -> bool:
        path = os.path.abspath(log_file)
        return any(isinstance(h, logging.FileHandler) and h.baseFilename == path
                   for h in self.logger.handlers)

    def log_game_start(self, cards: List[Optional[Card]], deck_size: int):
        """Log the opening board."""
        self.logger.info(f"\n=== NEW GAME STARTED ===")
        self.logger.info(f"Cards left in deck: {deck_size}")
        self.log_board(cards)

    def log_play(self, indices: List[int], cards: List[Card]):
        """Log a group removed by a player."""
        cards_str = ', '.join(format_card(card) for card in cards)
        self.logger.info(f"Removed slots {indices}: {cards_str}")

    def log_board(self, cards: List[Optional[Card]]):
        """Log the board contents."""
        self.logger.debug(f"Board: {format_board(cards)}")

    def log_game_end(self, won: bool, plays: int):
        """Log game completion."""
        self.logger.info(f"\n=== GAME COMPLETE ===")
        self.logger.info(f"Result: {'won' if won else 'lost'} after {plays} plays")
