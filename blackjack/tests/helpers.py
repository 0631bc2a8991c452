"""
Blackjack test helpers.

Builders for decks with a known card order, controllers dealing from
them, and a runner for scripted console sessions.
"""

import random
from typing import Optional

import click
from click.testing import CliRunner, Result

from blackjack.core import Card, Deck, SessionState
from blackjack.controller import BlackjackController, GameConfiguration
from blackjack.ui.cli import BlackjackCLI


def make_stacked_deck(*codes: str) -> Deck:
    """Deck that deals the given cards first, e.g. make_stacked_deck("AS", "10H").

    Once the stacked cards are used up the deck reshuffles as usual.
    """
    deck = Deck(rng=random.Random(0))
    deck._cards = [Card.from_str(code) for code in codes]
    deck._cursor = 0
    return deck


def make_controller(*codes: str, bankroll: int = 100,
                    session: Optional[SessionState] = None) -> BlackjackController:
    """Controller dealing the given cards in order.

    Deal order is player, dealer, player, dealer, then player hits and
    dealer draws.
    """
    return BlackjackController(
        config=GameConfiguration(),
        deck=make_stacked_deck(*codes),
        session=session or SessionState(bankroll=bankroll),
    )


def run_cli(cli: BlackjackCLI, input_text: str) -> Result:
    """Run a CLI game under click's test runner with scripted input."""
    @click.command()
    def play():
        cli.run()

    return CliRunner().invoke(play, input=input_text)
