"""
Type definitions for validy.

Provides the two-variant Outcome type (Success/Failure), the Violation record
and the merge law used to combine outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Union

# Path of a violation raised against the whole value rather than a sub-field
ROOT = "$"


@dataclass(frozen=True, slots=True)
class Violation:
    """A single validation failure: field path + human-readable message."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"[{self.path}] {self.message}"


@dataclass(frozen=True, slots=True)
class Success:
    """Outcome of a check that found nothing wrong."""

    def is_valid(self) -> bool:
        return True

    def is_invalid(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return True

    def merge(self, other: Outcome) -> Outcome:
        return other

    def raise_if_invalid(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Failure:
    """Outcome of a check that found one or more violations."""

    violations: tuple[Violation, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.violations, tuple):
            object.__setattr__(self, "violations", tuple(self.violations))
        if not self.violations:
            raise ValueError("Failure requires at least one violation")

    def is_valid(self) -> bool:
        return False

    def is_invalid(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return False

    def merge(self, other: Outcome) -> Outcome:
        if isinstance(other, Failure):
            return Failure(self.violations + other.violations)
        return self

    def paths(self) -> list[str]:
        return [v.path for v in self.violations]

    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    def to_list(self) -> list[dict[str, str]]:
        """Plain-data form for adapters that serialize violations."""
        return [{"path": v.path, "message": v.message} for v in self.violations]

    def summary(self) -> str:
        lines = ["Validation failed:"]
        lines.extend(f"• [{v.path}] {v.message}" for v in self.violations)
        return "\n".join(lines)

    def raise_if_invalid(self) -> None:
        from .errors import ValidationFailed

        raise ValidationFailed(self)


Outcome = Union[Success, Failure]


def success() -> Success:
    return Success()


def failure(path: str, message: str) -> Failure:
    """Failure with exactly one violation."""
    return Failure((Violation(path, message),))


def merge(a: Outcome, b: Outcome) -> Outcome:
    """
    Combine two outcomes.

    Success is the identity; two failures concatenate their violations,
    keeping the left-hand ones first.
    """
    return a.merge(b)


def merge_all(outcomes: Iterable[Outcome]) -> Outcome:
    result: Outcome = Success()
    for outcome in outcomes:
        result = result.merge(outcome)
    return result


def is_valid(outcome: Outcome) -> bool:
    return isinstance(outcome, Success)


# Type aliases
CheckFn = Callable[[Any], Outcome]
Projection = Callable[[Any], Any]
