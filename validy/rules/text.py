"""
Built-in checks for text values.

All checks treat None as a failing value. Compose with `&`, `|` and `.negate()`.
"""

from __future__ import annotations

import re
from typing import Iterable

from ..core import Check, leaf

EMAIL_PATTERN = re.compile(r"^[\w.+-]+@[\w-]+\.[\w.]{2,}$")
URL_PATTERN = re.compile(r"^https?://[\w\-.]+(:\d+)?(/[^\s]*)?$")
UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


# ── Presence ──────────────────────────────────────────────────────────────────


def NotNull() -> Check:
    return leaf(lambda _: True, "must not be null", name="NotNull()")


def NotBlank() -> Check:
    """Not None, and not empty or whitespace-only."""
    return leaf(lambda s: s.strip() != "", "must not be blank", name="NotBlank()")


# ── Length ────────────────────────────────────────────────────────────────────


def MinLength(n: int) -> Check:
    return leaf(
        lambda s: len(s) >= n,
        f"must be at least {n} characters",
        name=f"MinLength({n})",
    )


def MaxLength(n: int) -> Check:
    return leaf(
        lambda s: len(s) <= n,
        f"must be at most {n} characters",
        name=f"MaxLength({n})",
    )


def Length(lower: int, upper: int) -> Check:
    """
    Validate length is within range (inclusive).

    Reports both bounds independently, so a None value yields two violations.
    """
    return MinLength(lower) & MaxLength(upper)


# ── Pattern matching ──────────────────────────────────────────────────────────


def Matches(pattern: str | re.Pattern[str]) -> Check:
    """
    Validate the whole string matches a regex pattern.

    Usage:
        Matches(r"[a-z]+")
        Matches(r".*[A-Z].*").with_message("must contain an uppercase letter")
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return leaf(
        lambda s: compiled.fullmatch(s) is not None,
        f"must match pattern: {compiled.pattern}",
        name=f"Matches({compiled.pattern!r})",
    )


# ── Semantic formats ──────────────────────────────────────────────────────────


def Email() -> Check:
    return Matches(EMAIL_PATTERN).with_message("must be a valid email address")


def Url() -> Check:
    return Matches(URL_PATTERN).with_message("must be a valid URL (http/https)")


def Uuid() -> Check:
    return Matches(UUID_PATTERN).with_message("must be a valid UUID")


def Numeric() -> Check:
    return leaf(
        lambda s: all(c.isdigit() for c in s),
        "must contain only digits",
        name="Numeric()",
    )


def Alpha() -> Check:
    return leaf(
        lambda s: all(c.isalpha() for c in s),
        "must contain only letters",
        name="Alpha()",
    )


# ── Content ───────────────────────────────────────────────────────────────────


def StartsWith(prefix: str) -> Check:
    return leaf(lambda s: s.startswith(prefix), f'must start with "{prefix}"')


def EndsWith(suffix: str) -> Check:
    return leaf(lambda s: s.endswith(suffix), f'must end with "{suffix}"')


def Contains(substring: str) -> Check:
    return leaf(lambda s: substring in s, f'must contain "{substring}"')


def OneOf(values: Iterable[str]) -> Check:
    """
    Validate value is one of the allowed strings.

    Usage:
        OneOf(["USER", "ADMIN", "SENIOR"])
    """
    allowed = tuple(values)
    container = frozenset(allowed)
    return leaf(
        lambda s: s in container,
        f"must be one of: {', '.join(allowed)}",
        name=f"OneOf({allowed!r})",
    )
