"""
Decorators for controller layer functionality.

This module provides decorators for transaction management and logging
of controller operations.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

from ..core import SessionState
from .dto import RoundResult

F = TypeVar('F', bound=Callable[..., Any])


def atomic(func: F) -> F:
    """
    Decorator to make a controller operation all-or-nothing for the session.

    The session state (bankroll and counters) is copied before the call and
    restored if the decorated method raises.

    Args:
        func: The method to decorate. Must be a method of a class that has
              a _session attribute of type SessionState.

    Returns:
        The decorated function with atomic behavior.

    Example:
        @atomic
        def start_round(self, bet: int):
            # Session changes are rolled back if an exception occurs
            ...
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        if not hasattr(self, '_session'):
            raise AttributeError(
                f"@atomic decorator requires the class to have a '_session' attribute. "
                f"Class {self.__class__.__name__} does not have this attribute."
            )

        session = getattr(self, '_session')
        if not isinstance(session, SessionState):
            raise TypeError(
                f"@atomic decorator requires '_session' to be of type SessionState. "
                f"Got {type(session).__name__} instead."
            )

        original = session.copy()

        try:
            return func(self, *args, **kwargs)
        except Exception:
            session.restore(original)
            raise

    return wrapper


def _round_context(controller) -> str:
    """Describe the phase and stake of the round a controller is in."""
    phase = getattr(controller, '_phase', None)
    bet = getattr(controller, '_bet', None)
    parts = []
    if phase is not None:
        parts.append(f"phase={phase.value}")
    if bet:
        parts.append(f"bet={bet}")
    return f" [{', '.join(parts)}]" if parts else ""


def logged_action(action_name: Optional[str] = None):
    """
    Decorator to log a controller action with the round it acts on.

    The phase and current bet are included on start and on failure, so a
    rejected hit or an invalid bet can be traced to the round state that
    caused it.

    Args:
        action_name: Name used in the log; defaults to the function name.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, '_logger', None)
            name = action_name or func.__name__
            requested = f" with {args[0]!r}" if args else ""

            if logger:
                logger.debug(f"{name}{requested} requested{_round_context(self)}")

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                if logger:
                    logger.error(f"{name}{requested} rejected{_round_context(self)}: {e}")
                raise

            if logger:
                outcome = f" -> {result.outcome.value}" if isinstance(result, RoundResult) else ""
                logger.debug(f"{name} done{outcome}{_round_context(self)}")
            return result

        return wrapper
    return decorator
