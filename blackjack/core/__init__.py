"""
Core game logic for blackjack.

This package contains the fundamental game components: cards, the deck,
hand evaluation and the session record.
"""

import random
from typing import Optional

from .enums import Suit, Rank, Phase, PlayerAction, RoundOutcome
from .cards import Card, Deck, HIDDEN_CARD
from .hand import Hand, BLACKJACK
from .session import SessionState, DEFAULT_STARTING_BANKROLL
from .exceptions import BlackjackError, InvalidBetError, RoundStateError


def new_deck(seed: Optional[int] = None) -> Deck:
    """Create a shuffled deck.

    Args:
        seed: Optional seed for a reproducible shuffle.

    Returns:
        A new deck of cards.
    """
    return Deck(rng=random.Random(seed))


__all__ = [
    # Enums
    'Suit', 'Rank', 'Phase', 'PlayerAction', 'RoundOutcome',

    # Core classes
    'Card', 'Deck', 'Hand', 'SessionState',

    # Constants
    'HIDDEN_CARD', 'BLACKJACK', 'DEFAULT_STARTING_BANKROLL',

    # Errors
    'BlackjackError', 'InvalidBetError', 'RoundStateError',

    # Convenience functions
    'new_deck'
]
