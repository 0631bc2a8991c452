"""
Blackjack hand evaluation.

A Hand is the ordered list of cards held by the player or the dealer
for one round.
"""

from typing import List, Tuple

from .cards import Card, HIDDEN_CARD

BLACKJACK = 21


class Hand:
    """
    Cards held by one participant, in deal order.

    Aces count as 11 until the total would exceed 21, after which they
    are counted as 1 one at a time.
    """

    def __init__(self) -> None:
        self._cards: List[Card] = []

    def add(self, card: Card) -> None:
        """Append a card to the hand."""
        self._cards.append(card)

    def clear(self) -> None:
        """Remove every card from the hand."""
        self._cards.clear()

    def _evaluate(self) -> Tuple[int, int]:
        """Return (total, aces still counted as 11)."""
        total = sum(card.value for card in self._cards)
        soft_aces = sum(1 for card in self._cards if card.is_ace)
        while total > BLACKJACK and soft_aces > 0:
            total -= 10
            soft_aces -= 1
        return total, soft_aces

    def value(self) -> int:
        """
        Blackjack value of the hand.

        Returns:
            int: best total not exceeding 21 when possible; may be above 21
            for a bust hand
        """
        return self._evaluate()[0]

    def is_soft(self) -> bool:
        """True if an Ace is still being counted as 11."""
        return self._evaluate()[1] > 0

    def is_blackjack(self) -> bool:
        """True for a two-card 21."""
        return len(self._cards) == 2 and self.value() == BLACKJACK

    def is_bust(self) -> bool:
        return self.value() > BLACKJACK

    def render(self, hide_first: bool = False) -> str:
        """
        Display string for the hand.

        Args:
            hide_first: mask the first card (the dealer's hole card)

        Returns:
            str: space-separated cards, e.g. "?? K♠" or "A♥ 10♦"
        """
        shown = [
            HIDDEN_CARD if index == 0 and hide_first else str(card)
            for index, card in enumerate(self._cards)
        ]
        return " ".join(shown)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Hand({self.render()!r}, value={self.value()})"
