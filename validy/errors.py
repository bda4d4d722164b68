"""
Exceptions raised by validy.

Data problems are never raised; they come back as violations inside a Failure.
These exceptions cover misuse of the API and callers that opt into raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Failure


class ValidyError(Exception):
    """Base class for all validy exceptions."""


class BuilderError(ValidyError, RuntimeError):
    """A Builder was used after build(), or groups() had nothing to scope."""


class ValidationFailed(ValidyError, ValueError):
    """Raised by raise_if_invalid() and Registry.ensure_valid()."""

    def __init__(self, failure: Failure):
        self.failure = failure
        super().__init__(failure.summary())

    @property
    def violations(self):
        return self.failure.violations


class UnregisteredTypeError(ValidyError, LookupError):
    """No check is registered for the type of the value being validated."""

    def __init__(self, type_: type):
        self.type = type_
        super().__init__(f"No validator registered for {type_.__qualname__}")
