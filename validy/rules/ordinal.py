"""
Built-in checks for comparable values (int, float, Decimal, date, str, ...).

A value that cannot be compared with the bound fails with the check's message.
"""

from __future__ import annotations

from typing import Any

from ..core import Check, leaf


def Min(minimum: Any) -> Check:
    """Validate value >= minimum."""
    return leaf(
        lambda x: x >= minimum, f"must be >= {minimum}", name=f"Min({minimum!r})"
    )


def Max(maximum: Any) -> Check:
    """Validate value <= maximum."""
    return leaf(
        lambda x: x <= maximum, f"must be <= {maximum}", name=f"Max({maximum!r})"
    )


def Between(lower: Any, upper: Any) -> Check:
    """
    Validate lower <= value <= upper.

    Each bound reports on its own, like Min(lower) & Max(upper).
    """
    return Min(lower) & Max(upper)


def Gt(value: Any) -> Check:
    """Validate greater than."""
    return leaf(lambda x: x > value, f"must be > {value}", name=f"Gt({value!r})")


def Lt(value: Any) -> Check:
    """Validate less than."""
    return leaf(lambda x: x < value, f"must be < {value}", name=f"Lt({value!r})")


def Positive() -> Check:
    return leaf(lambda x: x > 0, "must be positive", name="Positive()")


def NonNegative() -> Check:
    return leaf(lambda x: x >= 0, "must not be negative", name="NonNegative()")
