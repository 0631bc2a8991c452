"""
Session state shared across rounds.

Holds the bankroll and the win/loss/push record for one run of the game.
"""

import copy
from dataclasses import dataclass
from typing import Optional

DEFAULT_STARTING_BANKROLL = 100


@dataclass
class SessionState:
    """
    Long-lived state of a playing session.

    Attributes:
        starting_bankroll: bankroll restored whenever the player runs dry
        bankroll: chips currently held, never negative
        wins: rounds won
        losses: rounds lost
        pushes: rounds tied
    """

    starting_bankroll: int = DEFAULT_STARTING_BANKROLL
    bankroll: Optional[int] = None
    wins: int = 0
    losses: int = 0
    pushes: int = 0

    def __post_init__(self):
        if self.starting_bankroll <= 0:
            raise ValueError(f"Starting bankroll must be positive: {self.starting_bankroll}")
        if self.bankroll is None:
            self.bankroll = self.starting_bankroll
        elif self.bankroll < 0:
            raise ValueError(f"Bankroll cannot be negative: {self.bankroll}")

    def record_win(self, amount: int) -> None:
        self.bankroll += amount
        self.wins += 1

    def record_loss(self, amount: int) -> None:
        if amount > self.bankroll:
            raise ValueError(f"Loss of {amount} exceeds bankroll {self.bankroll}")
        self.bankroll -= amount
        self.losses += 1

    def record_push(self) -> None:
        self.pushes += 1

    def replenish(self) -> bool:
        """
        Restore the starting bankroll if the player is out of chips.

        Returns:
            bool: True if the bankroll was reset
        """
        if self.bankroll > 0:
            return False
        self.bankroll = self.starting_bankroll
        return True

    def copy(self) -> 'SessionState':
        return copy.copy(self)

    def restore(self, other: 'SessionState') -> None:
        """Overwrite this session's fields with those of ``other``."""
        self.starting_bankroll = other.starting_bankroll
        self.bankroll = other.bankroll
        self.wins = other.wins
        self.losses = other.losses
        self.pushes = other.pushes

    def summary(self) -> str:
        return f"W:{self.wins} L:{self.losses} P:{self.pushes} | Bankroll: {self.bankroll}"
