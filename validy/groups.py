"""
Validation groups.

A group is an opaque, hashable tag attached to builder entries. Entries with no
group, or with DEFAULT, always run; other entries run only when one of their
groups is requested.

Usage:
    OnCreate = Group("OnCreate")
    OnUpdate = Group("OnUpdate")

    check = (
        validator()
        .field("password", "password", StrongPassword()).groups(OnCreate)
        .field("id", "id", NotNone()).groups(OnUpdate)
        .build()
    )
    check.validate(user, OnCreate)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import AbstractSet, Any


@dataclass(frozen=True, slots=True)
class Group:
    """Named group tag. Compared by name."""

    name: str

    def __repr__(self) -> str:
        return f"Group({self.name!r})"


DEFAULT = Group("Default")


def is_active(entry_groups: AbstractSet[Any], requested: AbstractSet[Any]) -> bool:
    """Whether an entry tagged with `entry_groups` runs for the `requested` groups."""
    if not entry_groups or DEFAULT in entry_groups:
        return True
    return not entry_groups.isdisjoint(requested)


def normalize_groups(groups: tuple[Any, ...]) -> frozenset[Any]:
    """
    Flatten the varargs form of a group request.

    Accepts validate(v, OnCreate, OnUpdate) as well as validate(v, {OnCreate})
    or any other iterable of ids, generators included. Strings and bytes are
    treated as single group ids.
    """
    flat: set[Any] = set()
    for g in groups:
        if isinstance(g, Iterable) and not isinstance(g, (str, bytes)):
            flat.update(g)
        else:
            flat.add(g)
    return frozenset(flat)
