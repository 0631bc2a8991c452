"""Data transfer objects.

Defines the data passed between the controller and the UI layer.
Pydantic dataclasses keep validation and serialisation consistent.
"""

import logging
from typing import ClassVar, List, Optional, Tuple
from datetime import datetime

from pydantic.dataclasses import dataclass as pydantic_dataclass
from pydantic import Field, field_validator

from blackjack.core import Phase, RoundOutcome, Card, DEFAULT_STARTING_BANKROLL


@pydantic_dataclass
class TableSnapshot:
    """Table state at one moment.

    The dealer's hole card is masked in ``dealer_display`` and
    ``dealer_total`` is None while ``dealer_hidden`` is set.
    """
    phase: Phase = Field(..., description="Current round phase")
    bet: int = Field(..., ge=0, description="Bet on the table")
    bankroll: int = Field(..., ge=0, description="Player bankroll")
    player_cards: List[Card] = Field(..., description="Player cards in deal order")
    player_display: str = Field(..., description="Rendered player hand")
    player_total: int = Field(..., ge=0, description="Player hand value")
    dealer_cards: List[Card] = Field(..., description="Dealer cards in deal order")
    dealer_display: str = Field(..., description="Rendered dealer hand, hole card masked when hidden")
    dealer_hidden: bool = Field(..., description="Whether the hole card is masked")
    dealer_total: Optional[int] = Field(None, description="Dealer hand value, None while hidden")
    player_soft: bool = Field(False, description="Player holds an Ace counted as 11")
    timestamp: datetime = Field(default_factory=datetime.now, description="Snapshot time")


@pydantic_dataclass
class RoundResult:
    """Result of a finished round.

    ``net_change`` is the bankroll change caused by the round:
    positive for a win, negative for a loss, zero for a push or an
    abandoned round.
    """
    outcome: RoundOutcome = Field(..., description="How the round ended")
    bet: int = Field(..., ge=0, description="Amount wagered")
    net_change: int = Field(..., description="Bankroll change")
    bankroll: int = Field(..., ge=0, description="Bankroll after settlement")
    player_total: int = Field(..., ge=0, description="Final player hand value")
    dealer_total: int = Field(..., ge=0, description="Final dealer hand value")
    round_number: int = Field(..., ge=1, description="Round number in this session")
    timestamp: datetime = Field(default_factory=datetime.now, description="Settlement time")

    @field_validator('net_change')
    @classmethod
    def validate_net_change(cls, v, info):
        """A round can never cost more than the bet."""
        bet = info.data.get('bet')
        if bet is not None and v < -bet:
            raise ValueError(f"Net change {v} exceeds bet {bet}")
        return v


@pydantic_dataclass
class GameConfiguration:
    """Game configuration.

    Only the starting bankroll, seed and logging level come from the
    command line; the dealer rule and payout are fixed house rules.
    """
    starting_bankroll: int = Field(DEFAULT_STARTING_BANKROLL, gt=0, description="Bankroll at start and after going broke")
    seed: Optional[int] = Field(None, description="Deck shuffle seed, random when omitted")
    log_level: str = Field("WARNING", description="Diagnostics logging level")

    # House rules, not constructor arguments
    DEALER_STAND_TOTAL: ClassVar[int] = 17
    BLACKJACK_PAYOUT: ClassVar[Tuple[int, int]] = (3, 2)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Normalise the level name and make sure logging knows it."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def blackjack_payout(self, bet: int) -> int:
        """Net win for a natural blackjack, rounded down."""
        numerator, denominator = self.BLACKJACK_PAYOUT
        return bet * numerator // denominator
