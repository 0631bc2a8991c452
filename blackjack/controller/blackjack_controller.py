"""
Blackjack game controller.

Bridges the core objects and the UI layer. The controller owns the deck,
both hands and the session state, and moves a round through its phases:
betting, dealing, the player's turn, the dealer's turn and resolution.
"""

import logging
import random
from typing import Optional

from ..core import (
    Deck, Hand, SessionState, Phase, RoundOutcome,
    InvalidBetError, RoundStateError
)
from .decorators import atomic, logged_action
from .dto import GameConfiguration, RoundResult, TableSnapshot


class BlackjackController:
    """Blackjack round controller.

    Responsibilities:
    - dealing from a single deck shared across rounds
    - running the player and dealer turns
    - settling bets against the session bankroll
    - providing table snapshots to the UI

    Collaborators are injected so tests can supply a seeded deck or a
    prepared session.
    """

    def __init__(
        self,
        config: Optional[GameConfiguration] = None,
        deck: Optional[Deck] = None,
        session: Optional[SessionState] = None,
        logger: Optional[logging.Logger] = None
    ):
        """Initialise the controller.

        Args:
            config: game configuration, defaults are used when None
            deck: deck to deal from; a deck seeded from ``config.seed`` when None
            session: session record; a fresh one using the configured
                starting bankroll when None
            logger: logger, the module logger when None
        """
        self._config = config or GameConfiguration()
        self._logger = logger or logging.getLogger(__name__)
        if deck is None:
            deck = Deck(rng=random.Random(self._config.seed), logger=self._logger)
        self._deck = deck
        self._session = session if session is not None else SessionState(starting_bankroll=self._config.starting_bankroll)
        self._player = Hand()
        self._dealer = Hand()
        self._phase = Phase.BETTING
        self._bet = 0
        self._round_number = 0

    @property
    def config(self) -> GameConfiguration:
        return self._config

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def bet(self) -> int:
        return self._bet

    @property
    def player_hand(self) -> Hand:
        return self._player

    @property
    def dealer_hand(self) -> Hand:
        return self._dealer

    def _require_phase(self, *phases: Phase) -> None:
        if self._phase not in phases:
            allowed = ", ".join(p.value for p in phases)
            raise RoundStateError(f"Operation not allowed in phase {self._phase.value} (expected {allowed})")

    def replenish_bankroll(self) -> bool:
        """Reset an empty bankroll to the starting value.

        Returns:
            True if the bankroll was reset
        """
        self._require_phase(Phase.BETTING, Phase.ROUND_OVER)
        replenished = self._session.replenish()
        if replenished:
            self._logger.info(f"Bankroll exhausted, reset to {self._session.bankroll}")
        return replenished

    @atomic
    @logged_action("start round")
    def start_round(self, bet: int) -> Optional[RoundResult]:
        """Take a bet and deal a new round.

        Deals player, dealer, player, dealer. If either side has a natural
        blackjack the round is settled at once.

        Args:
            bet: wager in [1, bankroll]

        Returns:
            The round result when a blackjack ended the round, otherwise None
            and the round moves to the player's turn.

        Raises:
            InvalidBetError: if the bet is not an integer in [1, bankroll]
            RoundStateError: if a round is already in progress
        """
        self._require_phase(Phase.BETTING, Phase.ROUND_OVER)
        if isinstance(bet, bool) or not isinstance(bet, int):
            raise InvalidBetError(f"Bet must be an integer, got {bet!r}")
        if not 1 <= bet <= self._session.bankroll:
            raise InvalidBetError(f"Bet must be between 1 and {self._session.bankroll}, got {bet}")

        self._phase = Phase.DEALING
        self._round_number += 1
        self._bet = bet
        self._player.clear()
        self._dealer.clear()

        for _ in range(2):
            self._player.add(self._deck.deal())
            self._dealer.add(self._deck.deal())

        self._logger.info(f"Round {self._round_number} dealt, bet {bet}, player {self._player.value()}")

        player_bj = self._player.is_blackjack()
        dealer_bj = self._dealer.is_blackjack()

        if player_bj and dealer_bj:
            return self._settle(RoundOutcome.BOTH_BLACKJACK, 0)
        if player_bj:
            return self._settle(RoundOutcome.PLAYER_BLACKJACK, self._config.blackjack_payout(bet))
        if dealer_bj:
            return self._settle(RoundOutcome.DEALER_BLACKJACK, -bet)

        self._phase = Phase.PLAYER_TURN
        return None

    @atomic
    @logged_action("hit")
    def hit(self) -> Optional[RoundResult]:
        """Deal one card to the player.

        Returns:
            The losing round result if the player busted, otherwise None

        Raises:
            RoundStateError: outside the player's turn
        """
        self._require_phase(Phase.PLAYER_TURN)
        card = self._deck.deal()
        self._player.add(card)
        self._logger.debug(f"Player draws {card}, total {self._player.value()}")

        if self._player.is_bust():
            return self._settle(RoundOutcome.PLAYER_BUST, -self._bet)
        return None

    @logged_action("stand")
    def stand(self) -> None:
        """End the player's turn and reveal the dealer's hole card.

        Raises:
            RoundStateError: outside the player's turn
        """
        self._require_phase(Phase.PLAYER_TURN)
        self._phase = Phase.DEALER_TURN

    @logged_action("quit round")
    def quit_round(self) -> RoundResult:
        """Abandon the round without settling the bet.

        Bankroll and counters are left untouched.

        Raises:
            RoundStateError: outside the player's turn
        """
        self._require_phase(Phase.PLAYER_TURN)
        self._phase = Phase.RESOLUTION
        result = self._make_result(RoundOutcome.ABANDONED, 0)
        self._finish_round(result)
        return result

    @atomic
    @logged_action("dealer turn")
    def play_dealer_turn(self) -> RoundResult:
        """Play out the dealer's hand and settle the round.

        The dealer hits while the total is below the stand total, with no
        distinction between soft and hard totals.

        Raises:
            RoundStateError: unless the player has stood
        """
        self._require_phase(Phase.DEALER_TURN)
        while self._dealer.value() < self._config.DEALER_STAND_TOTAL:
            card = self._deck.deal()
            self._dealer.add(card)
            self._logger.debug(f"Dealer draws {card}, total {self._dealer.value()}")

        player_total = self._player.value()
        dealer_total = self._dealer.value()

        if self._dealer.is_bust():
            return self._settle(RoundOutcome.DEALER_BUST, self._bet)
        if player_total > dealer_total:
            return self._settle(RoundOutcome.PLAYER_WIN, self._bet)
        if player_total < dealer_total:
            return self._settle(RoundOutcome.DEALER_WIN, -self._bet)
        return self._settle(RoundOutcome.PUSH, 0)

    def finish(self) -> SessionState:
        """End the session.

        Returns:
            The final session record
        """
        if self._phase in (Phase.DEALING, Phase.PLAYER_TURN, Phase.DEALER_TURN):
            self._logger.warning(f"Session ended mid-round in phase {self._phase.value}, bet {self._bet} not settled")
        self._phase = Phase.EXIT
        self._logger.info(f"Session over: {self._session.summary()}")
        return self._session

    def get_snapshot(self, reveal_dealer: Optional[bool] = None) -> TableSnapshot:
        """Return an immutable view of the table.

        Args:
            reveal_dealer: force the hole card shown or hidden; by default it
                is hidden during the deal and the player's turn

        Returns:
            Snapshot safe to hand to the UI layer
        """
        if reveal_dealer is None:
            reveal_dealer = self._phase not in (Phase.DEALING, Phase.PLAYER_TURN)
        hidden = not reveal_dealer and len(self._dealer) > 0

        return TableSnapshot(
            phase=self._phase,
            bet=self._bet,
            bankroll=self._session.bankroll,
            player_cards=list(self._player.cards),
            player_display=self._player.render(),
            player_total=self._player.value(),
            player_soft=self._player.is_soft(),
            dealer_cards=list(self._dealer.cards),
            dealer_display=self._dealer.render(hide_first=hidden),
            dealer_hidden=hidden,
            dealer_total=None if hidden else self._dealer.value(),
        )

    def _settle(self, outcome: RoundOutcome, net_change: int) -> RoundResult:
        """Apply the bankroll change and counters for a finished round."""
        self._phase = Phase.RESOLUTION
        if outcome.is_win:
            self._session.record_win(net_change)
        elif outcome.is_loss:
            self._session.record_loss(-net_change)
        elif outcome.is_push:
            self._session.record_push()

        result = self._make_result(outcome, net_change)
        self._finish_round(result)
        return result

    def _make_result(self, outcome: RoundOutcome, net_change: int) -> RoundResult:
        return RoundResult(
            outcome=outcome,
            bet=self._bet,
            net_change=net_change,
            bankroll=self._session.bankroll,
            player_total=self._player.value(),
            dealer_total=self._dealer.value(),
            round_number=self._round_number,
        )

    def _finish_round(self, result: RoundResult) -> None:
        self._phase = Phase.ROUND_OVER
        self._logger.info(
            f"Round {result.round_number} {result.outcome.value}: "
            f"net {result.net_change:+d}, {self._session.summary()}"
        )
