"""Blackjack CLI game.

Interactive console front end driving the blackjack controller, and the
``blackjack`` command line entry point.
"""

import logging
import sys
from typing import Optional

import click
from pydantic import ValidationError

from blackjack.core import PlayerAction, SessionState, DEFAULT_STARTING_BANKROLL
from blackjack.controller import BlackjackController, GameConfiguration, RoundResult
from .input_handler import CLIInputHandler
from .render import CLIRenderer

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class BlackjackCLI:
    """Blackjack CLI game.

    One human player against the scripted dealer, bankroll carried across
    rounds until the player quits.
    """

    def __init__(self, config: Optional[GameConfiguration] = None,
                 controller: Optional[BlackjackController] = None):
        """Initialise the CLI game.

        Args:
            config: game configuration
            controller: controller to drive, built from ``config`` when None
        """
        self.config = config or GameConfiguration()
        self.logger = logging.getLogger(__name__)
        self.controller = controller or BlackjackController(config=self.config)

    def run(self) -> SessionState:
        """Run the game loop until the player quits or input ends.

        Returns:
            The final session record
        """
        click.echo(CLIRenderer.render_banner(self.config.DEALER_STAND_TOTAL))

        try:
            while True:
                if self.controller.replenish_bankroll():
                    click.echo(CLIRenderer.render_bankroll_reset(self.controller.session.bankroll))

                bet = CLIInputHandler.get_bet(self.controller.session.bankroll)
                if bet == 0:
                    break

                self.play_round(bet)

                if not CLIInputHandler.get_continue_choice():
                    break
        except click.Abort:
            click.echo()
            self.logger.info("Input closed, ending session")

        session = self.controller.finish()
        click.echo(CLIRenderer.render_farewell(session))
        return session

    def play_round(self, bet: int) -> RoundResult:
        """Play one round for the given bet.

        Args:
            bet: validated wager

        Returns:
            The round result, including abandoned rounds

        Raises:
            click.Abort: if input ends during the player's turn
        """
        result = self.controller.start_round(bet)
        self._display_table(reveal_dealer=False)

        if result is not None:
            self._display_table(reveal_dealer=True)
            return self._display_result(result)

        while True:
            action = CLIInputHandler.get_player_action()

            if action == PlayerAction.HIT:
                result = self.controller.hit()
                self._display_table(reveal_dealer=False)
                if result is not None:
                    return self._display_result(result)
            elif action == PlayerAction.STAND:
                self.controller.stand()
                break
            else:
                return self._display_result(self.controller.quit_round())

        self._display_table(reveal_dealer=True)
        result = self.controller.play_dealer_turn()
        self._display_table(reveal_dealer=True)
        return self._display_result(result)

    def _display_table(self, reveal_dealer: bool) -> None:
        snapshot = self.controller.get_snapshot(reveal_dealer=reveal_dealer)
        click.echo(CLIRenderer.render_table(snapshot))

    def _display_result(self, result: RoundResult) -> RoundResult:
        click.echo(CLIRenderer.render_round_result(result))
        return result


@click.command()
@click.option('--seed', type=int, default=None,
              help='Seed the deck shuffle for a reproducible game.')
@click.option('--bankroll', type=click.IntRange(min=1), default=DEFAULT_STARTING_BANKROLL,
              show_default=True, help='Starting bankroll, restored whenever it runs out.')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default='WARNING', show_default=True, help='Diagnostics logged to stderr.')
def main(seed: Optional[int], bankroll: int, log_level: str) -> None:
    """Play single-player blackjack in the terminal."""
    try:
        config = GameConfiguration(starting_bankroll=bankroll, seed=seed, log_level=log_level)
    except ValidationError as e:
        raise click.UsageError(str(e))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    BlackjackCLI(config).run()


if __name__ == "__main__":
    main()
