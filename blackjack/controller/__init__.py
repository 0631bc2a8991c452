"""
Controller layer for the blackjack game.

This package provides the application controller that bridges the core
game logic with the user interface layer.
"""

from .blackjack_controller import BlackjackController
from .dto import TableSnapshot, RoundResult, GameConfiguration
from .decorators import atomic, logged_action

__all__ = [
    'BlackjackController',
    'TableSnapshot', 'RoundResult', 'GameConfiguration',
    'atomic', 'logged_action'
]
