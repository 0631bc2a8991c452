"""
Blackjack game exceptions.

Business errors raised by the core and controller layers.
"""


class BlackjackError(Exception):
    """Base class for blackjack game errors."""
    pass


class InvalidBetError(BlackjackError):
    """A bet outside the allowed range."""
    pass


class RoundStateError(BlackjackError):
    """An operation was requested in a phase that does not allow it."""
    pass
