"""Session state tests."""

import pytest

from blackjack.core import SessionState


@pytest.mark.unit
@pytest.mark.fast
class TestSessionState:
    """Bankroll and record keeping across rounds."""

    def test_defaults(self):
        session = SessionState()
        assert session.bankroll == 100
        assert (session.wins, session.losses, session.pushes) == (0, 0, 0)

    def test_bankroll_defaults_to_starting_value(self):
        assert SessionState(starting_bankroll=250).bankroll == 250

    def test_explicit_bankroll(self):
        assert SessionState(bankroll=0).bankroll == 0

    def test_rejects_non_positive_starting_bankroll(self):
        with pytest.raises(ValueError):
            SessionState(starting_bankroll=0)

    def test_record_win_loss_push(self):
        session = SessionState()
        session.record_win(20)
        session.record_loss(5)
        session.record_push()

        assert session.bankroll == 115
        assert session.summary() == "W:1 L:1 P:1 | Bankroll: 115"

    def test_loss_cannot_exceed_bankroll(self):
        session = SessionState(bankroll=10)
        with pytest.raises(ValueError):
            session.record_loss(11)

    def test_replenish_only_when_empty(self):
        session = SessionState(bankroll=5)
        assert not session.replenish()
        assert session.bankroll == 5

        session.record_loss(5)
        assert session.replenish()
        assert session.bankroll == 100

    def test_copy_and_restore(self):
        session = SessionState()
        saved = session.copy()
        session.record_win(50)

        session.restore(saved)

        assert session.bankroll == 100
        assert session.wins == 0
