"""
Card and deck data structures.

Contains the immutable Card value type and the Deck, which deals
sequentially from a shuffled 52-card sequence and reshuffles itself
when exhausted.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .enums import Suit, Rank

HIDDEN_CARD = "??"


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Holds a rank and a suit and knows its blackjack value.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """
        Display form of the card.

        Returns:
            str: rank symbol followed by suit symbol, e.g. "A♠" or "10♥"
        """
        return f"{self.rank.symbol}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Blackjack value, counting an Ace as 11."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        Build a card from a short code.

        Args:
            card_str: rank followed by suit, e.g. "AS", "10h" or "TD"

        Returns:
            Card: the matching card

        Raises:
            ValueError: if the code cannot be parsed
        """
        if len(card_str) < 2:
            raise ValueError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[:-1].upper(), card_str[-1].upper()

        rank_map = {rank.symbol: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "S": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str!r}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str!r}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Deck:
    """
    A single 52-card deck dealt from a cursor.

    Dealing past the last card rebuilds and reshuffles the deck
    (auto-reshoe), so ``deal`` never fails.
    """

    def __init__(self, rng: Optional[random.Random] = None, logger: Optional[logging.Logger] = None):
        """
        Build and shuffle a fresh deck.

        Args:
            rng: random generator owned by this deck; a time-seeded one is
                created when omitted
            logger: logger for reshuffle diagnostics
        """
        self._rng = rng or random.Random()
        self._logger = logger or logging.getLogger(__name__)
        self._cards: List[Card] = []
        self._cursor = 0
        self.reset()

    def reset(self) -> None:
        """Rebuild the full 52-card sequence, shuffle it and rewind the cursor."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        self.shuffle()
        self._cursor = 0

    def shuffle(self) -> None:
        """Shuffle the current card sequence in place."""
        self._rng.shuffle(self._cards)

    def deal(self) -> Card:
        """
        Deal the next card.

        Returns:
            Card: the card at the cursor; the deck is reset first when
            every card has already been dealt
        """
        if self._cursor >= len(self._cards):
            self._logger.debug("Deck exhausted after %d cards, reshuffling", self._cursor)
            self.reset()
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    @property
    def cards_remaining(self) -> int:
        """Number of cards left before the next reshuffle."""
        return len(self._cards) - self._cursor

    def __len__(self) -> int:
        return self.cards_remaining

    def __str__(self) -> str:
        return f"Deck({self.cards_remaining} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={self.cards_remaining}, rng={self._rng})"
