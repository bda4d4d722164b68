"""
Built-in checks for datetime values.

"Now" is read when the check runs, from validy.context.now(), in the value's
own timezone so aware and naive values each compare against a matching clock.
"""

from __future__ import annotations

from datetime import datetime

from ..context import now
from ..core import Check, leaf


def _now_for(value: datetime) -> datetime:
    return now(getattr(value, "tzinfo", None))


def Future() -> Check:
    """Value must be strictly after now."""
    return leaf(lambda t: t > _now_for(t), "must be in the future", name="Future()")


def FutureOrPresent() -> Check:
    return leaf(
        lambda t: t >= _now_for(t),
        "must be in the present or future",
        name="FutureOrPresent()",
    )


def Past() -> Check:
    """Value must be strictly before now."""
    return leaf(lambda t: t < _now_for(t), "must be in the past", name="Past()")


def PastOrPresent() -> Check:
    return leaf(
        lambda t: t <= _now_for(t),
        "must be in the present or past",
        name="PastOrPresent()",
    )


def After(reference: datetime) -> Check:
    """Value must be after a fixed reference datetime."""
    return leaf(
        lambda t: t > reference,
        f"must be after {reference.isoformat()}",
        name=f"After({reference.isoformat()})",
    )


def Before(reference: datetime) -> Check:
    """Value must be before a fixed reference datetime."""
    return leaf(
        lambda t: t < reference,
        f"must be before {reference.isoformat()}",
        name=f"Before({reference.isoformat()})",
    )
