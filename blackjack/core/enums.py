"""
Enumerations used throughout the blackjack game.

Contains card suits and ranks, round phases, player actions and round
outcomes.
"""

from enum import Enum, IntEnum


class Suit(Enum):
    """
    Playing card suit.

    Values are the Unicode symbols used when rendering a card.
    """

    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"


class Rank(IntEnum):
    """
    Playing card rank, ordered from TWO up to ACE.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """Short display symbol, e.g. "10", "J" or "A"."""
        if self <= Rank.TEN:
            return str(self.value)
        return self.name[0]

    @property
    def blackjack_value(self) -> int:
        """
        Value of the rank in blackjack.

        Returns:
            int: face value for 2-10, 10 for face cards, 11 for an Ace
        """
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)


class Phase(Enum):
    """
    Phases of a blackjack round.

    BETTING -> DEALING -> PLAYER_TURN -> DEALER_TURN -> RESOLUTION,
    then ROUND_OVER until the next bet or EXIT.
    """

    BETTING = "betting"
    DEALING = "dealing"
    PLAYER_TURN = "player_turn"
    DEALER_TURN = "dealer_turn"
    RESOLUTION = "resolution"
    ROUND_OVER = "round_over"
    EXIT = "exit"


class PlayerAction(Enum):
    """Actions available to the player during their turn."""

    HIT = "H"
    STAND = "S"
    QUIT_ROUND = "Q"


class RoundOutcome(Enum):
    """How a round ended from the player's point of view."""

    PLAYER_BLACKJACK = "player_blackjack"
    DEALER_BLACKJACK = "dealer_blackjack"
    BOTH_BLACKJACK = "both_blackjack"
    PLAYER_BUST = "player_bust"
    DEALER_BUST = "dealer_bust"
    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    PUSH = "push"
    ABANDONED = "abandoned"

    @property
    def is_win(self) -> bool:
        return self in (RoundOutcome.PLAYER_BLACKJACK, RoundOutcome.DEALER_BUST, RoundOutcome.PLAYER_WIN)

    @property
    def is_loss(self) -> bool:
        return self in (RoundOutcome.DEALER_BLACKJACK, RoundOutcome.PLAYER_BUST, RoundOutcome.DEALER_WIN)

    @property
    def is_push(self) -> bool:
        return self in (RoundOutcome.BOTH_BLACKJACK, RoundOutcome.PUSH)
