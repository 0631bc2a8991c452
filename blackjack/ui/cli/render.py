"""Blackjack CLI rendering.

Turns controller snapshots and round results into console text, keeping
display logic out of the game logic.
"""

from blackjack.core import RoundOutcome, SessionState
from blackjack.controller import TableSnapshot, RoundResult

SEPARATOR = "-" * 40


class CLIRenderer:
    """CLI renderer.

    Every method is a pure function of its arguments and returns the
    text to print.
    """

    @staticmethod
    def render_banner(dealer_stand_total: int = 17) -> str:
        """Render the startup banner with rules and controls.

        Args:
            dealer_stand_total: total at which the dealer stops drawing

        Returns:
            Banner text
        """
        lines = [
            "=== Terminal Blackjack ===",
            f"Rules: Dealer hits below {dealer_stand_total} and stands on any {dealer_stand_total}. Blackjack pays 3:2.",
            "Controls: (H)it, (S)tand, (Q)uit round, ENTER to confirm.",
            ""
        ]
        return "\n".join(lines)

    @staticmethod
    def render_table(snapshot: TableSnapshot) -> str:
        """Render the table.

        Args:
            snapshot: table snapshot

        Returns:
            Dealer hand (with total once revealed), player hand with total,
            bet and bankroll
        """
        dealer_line = f"Dealer: {snapshot.dealer_display}"
        if snapshot.dealer_total is not None:
            dealer_line += f" ({snapshot.dealer_total})"

        player_total = f"soft {snapshot.player_total}" if snapshot.player_soft else str(snapshot.player_total)

        lines = [
            "",
            SEPARATOR,
            dealer_line,
            f"Player: {snapshot.player_display} ({player_total})",
            f"Bet: {snapshot.bet} | Bankroll: {snapshot.bankroll}",
            SEPARATOR
        ]
        return "\n".join(lines)

    @staticmethod
    def render_round_result(result: RoundResult) -> str:
        """Render the outcome message of a round.

        Args:
            result: settled round

        Returns:
            Outcome message
        """
        outcome = result.outcome
        amount = abs(result.net_change)

        if outcome == RoundOutcome.BOTH_BLACKJACK:
            return "Both have Blackjack! Push."
        if outcome == RoundOutcome.PLAYER_BLACKJACK:
            return f"Blackjack! You win +{amount}."
        if outcome == RoundOutcome.DEALER_BLACKJACK:
            return f"Dealer Blackjack. You lose -{amount}."
        if outcome == RoundOutcome.PLAYER_BUST:
            return f"You bust.\nYou lose -{amount}."
        if outcome == RoundOutcome.DEALER_BUST:
            return f"Dealer busts. You win +{amount}."
        if outcome == RoundOutcome.PLAYER_WIN:
            return f"You win +{amount}."
        if outcome == RoundOutcome.DEALER_WIN:
            return f"You lose -{amount}."
        if outcome == RoundOutcome.PUSH:
            return "Push. Bet returned."
        return "Round aborted. No money exchanged."

    @staticmethod
    def render_bankroll_reset(bankroll: int) -> str:
        return f"You are out of funds. Resetting bankroll to {bankroll}."

    @staticmethod
    def render_bet_prompt(bankroll: int) -> str:
        return f"Bankroll: {bankroll} | Enter bet (1..{bankroll}), or 0 to quit"

    @staticmethod
    def render_farewell(session: SessionState) -> str:
        """Render the exit message with the final record."""
        return f"Exiting game. Final record: {session.summary()}"
