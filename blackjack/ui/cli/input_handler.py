"""Blackjack CLI input handling.

Reads and validates console input with click. Invalid input is reported
and the prompt repeats; it never reaches the controller.
"""

import string

import click

from blackjack.core import PlayerAction
from .render import CLIRenderer


class BetAmount(click.ParamType):
    """A bet made only of decimal digits, between 0 and the bankroll."""

    name = "bet"

    def __init__(self, bankroll: int):
        self.bankroll = bankroll

    def convert(self, value, param, ctx) -> int:
        if isinstance(value, int):
            text = str(value)
        else:
            text = value.strip()

        if not text or any(ch not in string.digits for ch in text):
            self.fail("Enter digits only.", param, ctx)

        amount = int(text)
        if amount > self.bankroll:
            self.fail(f"Bet must be between 0 and {self.bankroll}.", param, ctx)
        return amount


class LetterChoice(click.ParamType):
    """Accepts input by its first character, case-insensitively."""

    name = "letter"

    def __init__(self, letters: str):
        self.letters = letters.upper()

    def convert(self, value, param, ctx) -> str:
        letter = value.strip()[:1].upper()
        if not letter or letter not in self.letters:
            if len(self.letters) > 2:
                choices = ", ".join(self.letters[:-1]) + f", or {self.letters[-1]}"
            else:
                choices = " or ".join(self.letters)
            self.fail(f"Please enter {choices}.", param, ctx)
        return letter


class CLIInputHandler:
    """CLI input handler.

    Wraps click prompts so each one returns a validated value.
    End-of-input surfaces as ``click.Abort`` except at the bet prompt,
    where it means quitting the game.
    """

    @staticmethod
    def get_bet(bankroll: int) -> int:
        """Ask for a bet.

        Args:
            bankroll: current bankroll, the largest allowed bet

        Returns:
            The bet; 0 means quit, also returned on end-of-input
        """
        try:
            return click.prompt(
                CLIRenderer.render_bet_prompt(bankroll),
                type=BetAmount(bankroll),
                show_choices=False
            )
        except click.Abort:
            click.echo()
            return 0

    @staticmethod
    def get_player_action() -> PlayerAction:
        """Ask for hit, stand or quit-round.

        Raises:
            click.Abort: on end-of-input
        """
        letter = click.prompt(
            "(H)it, (S)tand, (Q)uit round",
            type=LetterChoice("HSQ"),
            show_choices=False
        )
        return PlayerAction(letter)

    @staticmethod
    def get_continue_choice() -> bool:
        """Ask whether to play another round.

        Returns:
            True to continue, False to quit

        Raises:
            click.Abort: on end-of-input
        """
        letter = click.prompt(
            "Play another round? (Y/N)",
            type=LetterChoice("YN"),
            show_choices=False
        )
        return letter == "Y"
