"""
Pydantic interop for validy.

Pydantic parses and coerces; validy checks the result. after_validator()
plugs a check into a pydantic type so its violations surface as pydantic
validation errors.

Usage:
    from typing import Annotated
    from pydantic import BaseModel

    class Signup(BaseModel):
        user: Annotated[User, after_validator(user_validator, OnCreate)]
"""

from __future__ import annotations

import re
from typing import Any, Union

from pydantic import AfterValidator

from .builder import Composite
from .core import to_check
from .types import ROOT, Failure

_SEGMENT = re.compile(r"\[(\d+)\]|([^.\[\]]+)")


def after_validator(check: Any, *groups: Any) -> AfterValidator:
    """
    Wrap a check as a pydantic AfterValidator.

    On failure a ValueError carrying the failure summary is raised, which
    pydantic reports as a `value_error` at the annotated field.
    """
    inner = to_check(check)

    def run(value: Any) -> Any:
        if isinstance(inner, Composite):
            result = inner.validate(value, *groups)
        else:
            result = inner(value)
        if isinstance(result, Failure):
            raise ValueError(result.summary())
        return value

    return AfterValidator(run)


def path_to_loc(path: str) -> tuple[Union[str, int], ...]:
    """
    Convert a violation path to a pydantic-style location tuple.

    Examples:
        path_to_loc("$")                 # ()
        path_to_loc("address.zip")       # ("address", "zip")
        path_to_loc("addresses.[0].zip") # ("addresses", 0, "zip")
    """
    if path == ROOT:
        return ()
    loc: list[Union[str, int]] = []
    for index, key in _SEGMENT.findall(path):
        loc.append(int(index) if index else key)
    return tuple(loc)


def to_error_details(failure: Failure) -> list[dict[str, Any]]:
    """Render violations the way pydantic's ValidationError.errors() does."""
    return [
        {"loc": path_to_loc(v.path), "msg": v.message, "type": "validy"}
        for v in failure.violations
    ]
