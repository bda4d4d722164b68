"""
A simple registry that maps a class to its check.

You populate it yourself; there is no scanning and no decorators. Adapters
(HTTP handlers, CLI commands, batch jobs) look up the check for the type of
the object they received and surface its violations.

Usage:
    registry = (
        Registry.builder()
        .register(CreateUserRequest, create_user_validator)
        .register(UpdateUserRequest, update_user_validator)
        .build()
    )
    registry.validate(request, OnCreate)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .builder import Composite
from .core import CheckOps, to_check
from .errors import UnregisteredTypeError
from .types import Outcome

logger = logging.getLogger(__name__)


class Registry:
    """Immutable type -> check lookup."""

    def __init__(self, checks: Optional[Mapping[type, Any]] = None):
        self._checks: Mapping[type, CheckOps] = MappingProxyType(
            {t: to_check(c) for t, c in (checks or {}).items()}
        )

    @staticmethod
    def builder() -> RegistryBuilder:
        return RegistryBuilder()

    def find(self, type_: type) -> Optional[CheckOps]:
        """Check registered for `type_`, falling back along its MRO."""
        for klass in type_.__mro__:
            check = self._checks.get(klass)
            if check is not None:
                return check
        return None

    def supports(self, type_: type) -> bool:
        return self.find(type_) is not None

    def validate(self, value: Any, *groups: Any) -> Outcome:
        """
        Validate `value` with the check registered for its type.

        Raises:
            UnregisteredTypeError: If nothing is registered for type(value)
        """
        check = self.find(type(value))
        if check is None:
            raise UnregisteredTypeError(type(value))
        if isinstance(check, Composite):
            return check.validate(value, *groups)
        return check(value)

    def ensure_valid(self, value: Any, *groups: Any) -> Any:
        """
        Validate `value` and return it unchanged.

        Raises:
            ValidationFailed: If any violation was found
            UnregisteredTypeError: If nothing is registered for type(value)
        """
        self.validate(value, *groups).raise_if_invalid()
        return value


class RegistryBuilder:
    def __init__(self) -> None:
        self._checks: dict[type, Any] = {}

    def register(self, type_: type, check: Any) -> RegistryBuilder:
        logger.debug("Registering validator for %s", type_.__qualname__)
        self._checks[type_] = check
        return self

    def build(self) -> Registry:
        return Registry(self._checks)
