"""
Core check classes for validy.

Provides the Check dataclass and the combinator algebra (and, or, negate,
relabel, adapt) shared by every check-like object, including Composite.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .types import (
    ROOT,
    CheckFn,
    Failure,
    Outcome,
    Projection,
    Success,
    Violation,
    failure,
    merge_all,
    success,
)


class CheckOps:
    """
    Combinator methods for anything callable as `value -> Outcome`.

    Mixed into Check and Composite so both compose the same way.
    """

    __slots__ = ()

    def __call__(self, value: Any) -> Outcome:  # pragma: no cover - abstract
        raise NotImplementedError

    def __and__(self, other: Any) -> Check:
        """
        Combine with AND logic: both run, all violations are kept.

        Usage:
            NotBlank() & MaxLength(100)
        """
        return all_of(self, other)

    def __rand__(self, other: Any) -> Check:
        return all_of(other, self)

    def __or__(self, other: Any) -> Check:
        """
        Combine with OR logic: the first success wins.

        When both fail only the right-hand failure is reported.
        """
        return any_of(self, other)

    def __ror__(self, other: Any) -> Check:
        return any_of(other, self)

    def negate(self, message: str) -> Check:
        return negate(self, message)

    def relabel(
        self, path: Optional[str] = None, message: Optional[str] = None
    ) -> Check:
        return relabel(self, path=path, message=message)

    def with_message(self, message: str) -> Check:
        """Return new check reporting `message` instead of its own wording."""
        return relabel(self, message=message)

    def adapt(self, projection: Projection | str) -> Check:
        return adapt(self, projection)

    def as_field(self, name: str) -> Check:
        return as_field(self, name)


@dataclass(frozen=True, slots=True)
class Check(CheckOps):
    """
    Immutable check node.

    The fundamental building block. Wraps a function from a value to an
    Outcome; holds no other state, so one instance can be shared freely.
    """

    fn: CheckFn
    name: Optional[str] = field(default=None, compare=False)

    def __call__(self, value: Any) -> Outcome:
        result = self.fn(value)
        if not isinstance(result, (Success, Failure)):
            raise TypeError(
                f"{self!r} returned {type(result).__name__}, "
                "expected Success or Failure"
            )
        return result

    def __repr__(self) -> str:
        return f"Check({self.name})" if self.name else f"Check({self.fn!r})"


def to_check(c: Any) -> CheckOps:
    """
    Coerce a value to a check.

    Conversion rules:
        Check | Composite -> pass through
        type -> IsInstance(type)
        Callable -> Check(fn=callable), which must return an Outcome
    """
    if isinstance(c, CheckOps):
        return c
    if isinstance(c, type):
        from .rules.collection import IsInstance

        return IsInstance(c)
    if callable(c):
        return Check(c)
    raise TypeError(f"Cannot convert {type(c).__name__} to check")


# ── Paths ─────────────────────────────────────────────────────────────────────


def qualify(prefix: str, path: str) -> str:
    """Path of `path` seen from a parent that reaches it through `prefix`."""
    return prefix if path == ROOT else f"{prefix}.{path}"


def index_path(index: int, path: str) -> str:
    """Path of `path` inside the element at position `index` of a collection."""
    return f"[{index}]" if path == ROOT else f"[{index}].{path}"


def rewrite_paths(outcome: Outcome, fn: Callable[[str], str]) -> Outcome:
    if isinstance(outcome, Failure):
        return Failure(
            tuple(Violation(fn(v.path), v.message) for v in outcome.violations)
        )
    return outcome


def attr(path: str) -> Projection:
    """
    Projection reading a dotted name through mappings and attributes.

    A missing key or attribute at any step yields None, which every built-in
    leaf check reports as absent.

    Examples:
        attr("email")(user)            # user.email or user["email"]
        attr("address.zip")(user)      # nested
    """
    keys = path.split(".")

    def project(source: Any) -> Any:
        current = source
        for key in keys:
            if current is None:
                return None
            if isinstance(current, Mapping):
                current = current.get(key)
            else:
                current = getattr(current, key, None)
        return current

    project.__qualname__ = f"attr({path!r})"
    return project


def to_projection(p: Projection | str) -> Projection:
    if isinstance(p, str):
        return attr(p)
    if callable(p):
        return p
    raise TypeError(f"Cannot use {type(p).__name__} as a projection")


# ── Combinators ───────────────────────────────────────────────────────────────


def all_of(*checks: Any) -> Check:
    """Run every check against the same value and merge all of their outcomes."""
    resolved = tuple(to_check(c) for c in checks)

    def run(value: Any) -> Outcome:
        return merge_all([c(value) for c in resolved])

    return Check(run, name=" & ".join(_name(c) for c in resolved))


def any_of(*checks: Any) -> Check:
    """
    Try each check in turn and succeed on the first success.

    When every check fails, only the last attempted failure is reported.
    """
    if not checks:
        raise ValueError("any_of() requires at least one check")
    resolved = tuple(to_check(c) for c in checks)

    def run(value: Any) -> Outcome:
        result: Outcome = success()
        for c in resolved:
            result = c(value)
            if result.is_valid():
                return result
        return result

    return Check(run, name=" | ".join(_name(c) for c in resolved))


def negate(check: Any, message: str) -> Check:
    """Succeed where `check` fails; otherwise fail at ROOT with `message`."""
    inner = to_check(check)

    def run(value: Any) -> Outcome:
        if inner(value).is_valid():
            return failure(ROOT, message)
        return success()

    return Check(run, name=f"not {_name(inner)}")


def relabel(
    check: Any, *, path: Optional[str] = None, message: Optional[str] = None
) -> Check:
    """Override the path and/or message of every violation `check` reports."""
    if path is None and message is None:
        raise TypeError("relabel() needs a path or a message")
    inner = to_check(check)

    def run(value: Any) -> Outcome:
        result = inner(value)
        if isinstance(result, Failure):
            return Failure(
                tuple(
                    Violation(
                        v.path if path is None else path,
                        v.message if message is None else message,
                    )
                    for v in result.violations
                )
            )
        return result

    return Check(run, name=_name(inner))


def adapt(check: Any, projection: Projection | str) -> Check:
    """Run `check` against `projection(value)`, leaving paths untouched."""
    inner = to_check(check)
    project = to_projection(projection)

    def run(value: Any) -> Outcome:
        return inner(project(value))

    return Check(run, name=_name(inner))


def as_field(check: Any, name: str) -> Check:
    """Qualify every violation path of `check` with the field `name`."""
    inner = to_check(check)

    def run(value: Any) -> Outcome:
        return rewrite_paths(inner(value), lambda p: qualify(name, p))

    return Check(run, name=f"{name}: {_name(inner)}")


# ── Leaf construction ─────────────────────────────────────────────────────────


def leaf(
    predicate: Callable[[Any], bool],
    message: str,
    *,
    path: str = ROOT,
    name: Optional[str] = None,
) -> Check:
    """
    Build a leaf check from a boolean predicate.

    None always fails with `message`. A predicate raising TypeError,
    ValueError or AttributeError on an ill-typed value counts as a failed
    predicate.
    """

    def run(value: Any) -> Outcome:
        if value is None:
            return failure(path, message)
        try:
            passed = predicate(value)
        except (TypeError, ValueError, AttributeError):
            passed = False
        return success() if passed else failure(path, message)

    return Check(run, name=name or message)


def Satisfies(
    predicate: Callable[[Any], bool], message: str, path: str = ROOT
) -> Check:
    """
    Create check from arbitrary predicate function.

    Usage:
        Satisfies(lambda x: x > 0, "must be positive")
        Satisfies(lambda u: u.age >= 65, "SENIOR role requires age >= 65")
    """
    return leaf(predicate, message, path=path, name=f"Satisfies({message!r})")


def _name(c: Any) -> str:
    name = getattr(c, "name", None)
    if isinstance(name, str):
        return name
    return getattr(c, "__qualname__", type(c).__name__)
