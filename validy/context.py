"""
Context manager for validation configuration (e.g., the clock used by time rules).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, tzinfo
from typing import Callable, Optional

# Context variable for the time source used by the instant rules
_clock: ContextVar[Optional[Callable[[], datetime]]] = ContextVar(
    "validy_clock", default=None
)


def now(tz: Optional[tzinfo] = None) -> datetime:
    """
    Current time from the active clock.

    With `tz` given the result is aware and expressed in `tz`; without it the
    result is naive local time, matching a naive value under validation.
    """
    clock = _clock.get()
    if clock is None:
        return datetime.now(tz)

    current = clock()
    if tz is None:
        return current.replace(tzinfo=None) if current.tzinfo else current
    if current.tzinfo is None:
        return current.replace(tzinfo=tz)
    return current.astimezone(tz)


@contextmanager
def validation_context(*, clock: Optional[Callable[[], datetime]] = None):
    """
    Context manager for validation configuration.

    Args:
        clock: Zero-argument callable returning the datetime that Future(),
               Past() and friends treat as "now". None restores the system clock.

    Example:
        from datetime import datetime, timezone
        from validy import Future, validation_context

        frozen = datetime(2030, 1, 1, tzinfo=timezone.utc)

        with validation_context(clock=lambda: frozen):
            Future()(datetime(2029, 12, 31, tzinfo=timezone.utc))  # Failure
    """
    token = _clock.set(clock)
    try:
        yield
    finally:
        _clock.reset(token)
