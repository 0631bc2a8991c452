"""Blackjack CLI user interface.

Provides the console version of the game:
- the CLI game class and entry point
- the renderer (display logic)
- the input handler (user interaction)
"""

from .cli_game import BlackjackCLI, main
from .render import CLIRenderer
from .input_handler import CLIInputHandler, BetAmount, LetterChoice

__all__ = [
    'BlackjackCLI',
    'main',
    'CLIRenderer',
    'CLIInputHandler',
    'BetAmount',
    'LetterChoice'
]
