"""
Tests for cards and the deck.

Covers card parsing and display, deterministic shuffling with an injected
generator, and the automatic reshuffle when the deck runs out.
"""

import random
from dataclasses import FrozenInstanceError

import pytest

from blackjack.core import Card, Deck, Rank, Suit, new_deck
from blackjack.tests.helpers import make_stacked_deck


@pytest.mark.unit
@pytest.mark.fast
class TestCard:
    """Card value type tests."""

    def test_str_uses_rank_and_suit_symbols(self):
        assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10♥"
        assert str(Card(Rank.QUEEN, Suit.CLUBS)) == "Q♣"

    def test_blackjack_values(self):
        assert Card(Rank.TWO, Suit.CLUBS).value == 2
        assert Card(Rank.NINE, Suit.CLUBS).value == 9
        assert Card(Rank.TEN, Suit.CLUBS).value == 10
        assert Card(Rank.JACK, Suit.CLUBS).value == 10
        assert Card(Rank.QUEEN, Suit.CLUBS).value == 10
        assert Card(Rank.KING, Suit.CLUBS).value == 10
        assert Card(Rank.ACE, Suit.CLUBS).value == 11

    def test_cards_are_immutable(self):
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(FrozenInstanceError):
            card.rank = Rank.TWO

    def test_from_str(self):
        assert Card.from_str("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_str("10h") == Card(Rank.TEN, Suit.HEARTS)
        assert Card.from_str("TD") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_str("kc") == Card(Rank.KING, Suit.CLUBS)

    @pytest.mark.parametrize("code", ["", "A", "1S", "AX", "11H"])
    def test_from_str_rejects_bad_codes(self, code):
        with pytest.raises(ValueError):
            Card.from_str(code)


@pytest.mark.unit
@pytest.mark.fast
class TestDeck:
    """Deck dealing and reshuffle tests."""

    def test_new_deck_has_52_unique_cards(self):
        deck = Deck(rng=random.Random(1))
        cards = [deck.deal() for _ in range(52)]

        assert len(set(cards)) == 52
        assert deck.cards_remaining == 0

    def test_same_seed_same_order(self):
        deck1 = Deck(rng=random.Random(123))
        deck2 = Deck(rng=random.Random(123))

        assert [deck1.deal() for _ in range(10)] == [deck2.deal() for _ in range(10)]

    def test_different_seeds_differ(self):
        deck1 = new_deck(seed=42)
        deck2 = new_deck(seed=43)

        assert [deck1.deal() for _ in range(52)] != [deck2.deal() for _ in range(52)]

    def test_deal_advances_cursor(self):
        deck = Deck(rng=random.Random(5))
        assert len(deck) == 52

        deck.deal()
        deck.deal()

        assert len(deck) == 50
        assert str(deck) == "Deck(50 cards remaining)"

    def test_53rd_deal_reshuffles(self):
        deck = Deck(rng=random.Random(7))
        for _ in range(52):
            deck.deal()

        card = deck.deal()

        assert isinstance(card, Card)
        assert deck.cards_remaining == 51

    def test_reset_restores_full_deck(self):
        deck = Deck(rng=random.Random(9))
        for _ in range(30):
            deck.deal()

        deck.reset()

        assert deck.cards_remaining == 52
        assert len({deck.deal() for _ in range(52)}) == 52

    def test_shuffle_keeps_the_same_cards(self):
        deck = Deck(rng=random.Random(11))
        before = sorted(deck._cards, key=lambda c: (c.suit.name, c.rank))

        deck.shuffle()

        assert sorted(deck._cards, key=lambda c: (c.suit.name, c.rank)) == before

    def test_stacked_deck_deals_in_order_then_reshoes(self):
        deck = make_stacked_deck("AS", "KD")

        assert deck.deal() == Card(Rank.ACE, Suit.SPADES)
        assert deck.deal() == Card(Rank.KING, Suit.DIAMONDS)
        assert isinstance(deck.deal(), Card)
        assert deck.cards_remaining == 51


@pytest.mark.unit
@pytest.mark.fast
class TestCorePublicAPI:
    """The names ``blackjack.core`` exports."""

    def test_exports(self):
        import blackjack.core as core

        assert set(core.__all__) == {
            'Suit', 'Rank', 'Phase', 'PlayerAction', 'RoundOutcome',
            'Card', 'Deck', 'Hand', 'SessionState',
            'HIDDEN_CARD', 'BLACKJACK', 'DEFAULT_STARTING_BANKROLL',
            'BlackjackError', 'InvalidBetError', 'RoundStateError',
            'new_deck',
        }
        for name in core.__all__:
            assert hasattr(core, name)
