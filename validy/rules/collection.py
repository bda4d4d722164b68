"""
Built-in checks for collections and general objects.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..core import Check, index_path, leaf, rewrite_paths, to_check
from ..types import ROOT, Outcome, failure, merge_all


# ── Collections ───────────────────────────────────────────────────────────────


def NotEmpty() -> Check:
    return leaf(lambda c: len(c) > 0, "must not be empty", name="NotEmpty()")


def MinSize(n: int) -> Check:
    return leaf(
        lambda c: len(c) >= n,
        f"must have at least {n} element(s)",
        name=f"MinSize({n})",
    )


def MaxSize(n: int) -> Check:
    return leaf(
        lambda c: len(c) <= n,
        f"must have at most {n} element(s)",
        name=f"MaxSize({n})",
    )


# ── Element-level validation ──────────────────────────────────────────────────


def EachElement(element_check: Any) -> Check:
    """
    Validate every element of a collection against `element_check`.

    Violations are collected from all elements; iteration never stops at the
    first failure. Each path is prefixed with the element's index, e.g. "[0]"
    or "[1].email". An absent collection is a single ROOT failure; strings,
    bytes and mappings are not collections of elements.

    Usage:
        EachElement(NotBlank())
        EachElement(address_validator)
    """
    inner = to_check(element_check)

    def run(collection: Any) -> Outcome:
        if collection is None:
            return failure(ROOT, "must not be absent")
        if not isinstance(collection, Iterable) or isinstance(
            collection, (str, bytes, Mapping)
        ):
            return failure(ROOT, "must be a collection")
        return merge_all(
            [
                rewrite_paths(inner(element), lambda p, i=i: index_path(i, p))
                for i, element in enumerate(collection)
            ]
        )

    return Check(run, name="EachElement()")


# ── General object ────────────────────────────────────────────────────────────


def NotNone() -> Check:
    return leaf(lambda _: True, "must not be null", name="NotNone()")


def EqualTo(expected: Any) -> Check:
    return leaf(
        lambda x: x == expected,
        f"must equal {expected}",
        name=f"EqualTo({expected!r})",
    )


def IsInstance(t: type | tuple[type, ...]) -> Check:
    """
    Validate that value is an instance of type.

    Usage:
        IsInstance(int) & Min(0)
    """
    names = t.__name__ if isinstance(t, type) else " or ".join(x.__name__ for x in t)
    return leaf(
        lambda x: isinstance(x, t),
        f"must be an instance of {names}",
        name=f"IsInstance({names})",
    )
