"""
Elevens package initialization.
Location: elevens/__init__.py
"""

from .card import Card
from .deck import Deck
from .rules import LegalityRules, ElevensRules, Play, find_pair_sum_11, find_jqk
from .board import Board, InvalidSelectionError
from .game import ElevensGame
from .simulation import ElevensSimulation

__all__ = [
    'Card',
    'Deck',
    'LegalityRules',
    'ElevensRules',
    'Play',
    'find_pair_sum_11',
    'find_jqk',
    'Board',
    'InvalidSelectionError',
    'ElevensGame',
    'ElevensSimulation'
]
