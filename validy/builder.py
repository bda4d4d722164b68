"""
Fluent builder that assembles field-level, cross-field, conditional, nested
and per-element checks into one Composite, each optionally scoped to groups.

Group semantics:
    - Entries with no group (or DEFAULT) run on every call.
    - Entries with an explicit group run only when that group is requested.
    - composite.validate(value) runs DEFAULT entries only.
    - composite.validate(value, OnCreate) runs DEFAULT + OnCreate entries.

Example:
    OnCreate = Group("OnCreate")

    user_validator = (
        validator(User)
        .field("name", "name", NotBlank(), MaxLength(100))
        .field("email", "email", NotBlank(), Email())
        .field("password", "password", StrongPassword()).groups(OnCreate)
        .rule(passwords_match)
        .nested("address", "address", address_validator)
        .build()
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .core import (
    Check,
    CheckOps,
    adapt,
    qualify,
    rewrite_paths,
    to_check,
    to_projection,
)
from .errors import BuilderError
from .groups import is_active, normalize_groups
from .rules.collection import EachElement
from .types import Outcome, Projection, failure, merge_all, success

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Entry:
    """One check paired with the groups it belongs to. Empty groups means DEFAULT."""

    check: CheckOps
    groups: frozenset[Any] = frozenset()

    def is_active_for(self, requested: frozenset[Any]) -> bool:
        return is_active(self.groups, requested)


@dataclass(frozen=True, slots=True)
class Composite(CheckOps):
    """
    Immutable, ordered collection of group-tagged checks.

    A Composite is itself a check and can be nested in another builder or
    combined with `&` and `|`; used that way only its DEFAULT entries run.
    """

    entries: tuple[Entry, ...] = ()

    def __call__(self, value: Any, *groups: Any) -> Outcome:
        return self.validate(value, *groups)

    def validate(self, value: Any, *groups: Any) -> Outcome:
        """
        Run DEFAULT entries plus those belonging to any requested group.

        Every active entry runs, in registration order, and all outcomes are
        merged. Groups may be passed as varargs or as a single set.
        """
        requested = normalize_groups(groups)
        return merge_all(
            [
                entry.check(value)
                for entry in self.entries
                if entry.is_active_for(requested)
            ]
        )


class Builder:
    """
    Single-owner, sequential builder for a Composite.

    Each registration is held as pending until the next builder call, which
    commits it to DEFAULT, or until groups() commits it to explicit groups.
    build() consumes the builder; using it afterwards raises BuilderError.
    """

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self._pending: Optional[tuple[CheckOps, ...]] = None
        self._serial = 0
        self._built = False

    # ── Registration ──────────────────────────────────────────────────────────

    def field(self, name: str, projection: Projection | str, *checks: Any) -> Step:
        """
        Register checks against the sub-value `projection(value)`.

        Violations at ROOT are reported at `name`; qualified paths become
        `name.<path>`. Registers one entry per check.
        """
        project = to_projection(projection)
        return self._register(*(adapt(c, project).as_field(name) for c in checks))

    def require(self, name: str, projection: Projection | str) -> Step:
        """Register a presence check reporting "is required" at `name`."""
        project = to_projection(projection)

        def run(value: Any) -> Outcome:
            if project(value) is None:
                return failure(name, "is required")
            return success()

        return self._register(Check(run, name=f"require({name!r})"))

    def rule(self, check: Any) -> Step:
        """Register a whole-value check verbatim, e.g. a cross-field invariant."""
        return self._register(to_check(check))

    def when(self, predicate: Callable[[Any], bool], check: Any) -> Step:
        """Register `check`, run only for values where `predicate(value)` holds."""
        inner = to_check(check)

        def run(value: Any) -> Outcome:
            if not predicate(value):
                return success()
            return inner(value)

        return self._register(Check(run, name="when"))

    def nested(self, prefix: str, projection: Projection | str, child: Any) -> Step:
        """Register a child check for a sub-object, its paths prefixed by `prefix`."""
        project = to_projection(projection)
        inner = to_check(child)

        def run(value: Any) -> Outcome:
            return rewrite_paths(inner(project(value)), lambda p: qualify(prefix, p))

        return self._register(Check(run, name=f"nested {prefix!r}"))

    def each_element(
        self, name: str, projection: Projection | str, element_check: Any
    ) -> Step:
        """Register `element_check` for every member of the collection at `name`."""
        return self.field(name, projection, EachElement(element_check))

    # ── Scoping and finalization ──────────────────────────────────────────────

    def groups(self, *ids: Any) -> Builder:
        """Scope the most recent registration to `ids`, removing it from DEFAULT."""
        self._ensure_open()
        if self._pending is None:
            raise BuilderError("groups() must follow a registration")
        group_set = normalize_groups(ids)
        if not group_set:
            raise BuilderError("groups() requires at least one group")
        self._commit(group_set)
        return self

    def build(self) -> Composite:
        """Freeze the registered entries into a Composite and consume the builder."""
        self._ensure_open()
        self._commit()
        entries, self._entries = tuple(self._entries), []
        self._built = True
        logger.debug("Built composite with %d entries", len(entries))
        return Composite(entries)

    # ── Internals ─────────────────────────────────────────────────────────────

    def _register(self, *checks: CheckOps) -> Step:
        self._ensure_open()
        self._commit()
        self._pending = checks
        self._serial += 1
        return Step(self, self._serial)

    def _commit(self, groups: frozenset[Any] = frozenset()) -> None:
        if self._pending is not None:
            self._entries.extend(Entry(c, groups) for c in self._pending)
            self._pending = None

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderError("Builder was already consumed by build()")


class Step:
    """
    Returned by every registration call. Call .groups(...) to scope the
    registration, or keep chaining builder methods, which commits it to DEFAULT.
    """

    __slots__ = ("_builder", "_serial")

    def __init__(self, builder: Builder, serial: int):
        self._builder = builder
        self._serial = serial

    def groups(self, *ids: Any) -> Builder:
        """Scopes this registration to the given groups, replacing DEFAULT."""
        self._builder._ensure_open()
        if self._builder._serial != self._serial or self._builder._pending is None:
            raise BuilderError("groups() must directly follow its registration")
        return self._builder.groups(*ids)

    # ── Delegate so chaining continues without calling .groups() ──────────────

    def field(self, name: str, projection: Projection | str, *checks: Any) -> Step:
        return self._builder.field(name, projection, *checks)

    def require(self, name: str, projection: Projection | str) -> Step:
        return self._builder.require(name, projection)

    def rule(self, check: Any) -> Step:
        return self._builder.rule(check)

    def when(self, predicate: Callable[[Any], bool], check: Any) -> Step:
        return self._builder.when(predicate, check)

    def nested(self, prefix: str, projection: Projection | str, child: Any) -> Step:
        return self._builder.nested(prefix, projection, child)

    def each_element(
        self, name: str, projection: Projection | str, element_check: Any
    ) -> Step:
        return self._builder.each_element(name, projection, element_check)

    def build(self) -> Composite:
        return self._builder.build()


def validator(type_: Optional[type] = None) -> Builder:
    """
    Creates a new Builder. `type_` documents the validated type only.

    Usage:
        address_validator = (
            validator(Address)
            .field("street", "street", NotBlank(), MaxLength(200))
            .field("zip", "zip", NotBlank(), UsZip())
            .build()
        )
    """
    return Builder()
