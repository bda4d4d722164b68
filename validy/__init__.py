"""
validy - composable, path-aware validation for already-typed Python values.

Usage:
    from validy import Group, NotBlank, Email, Min, validator

    OnCreate = Group("OnCreate")

    user_validator = (
        validator(User)
        .field("name", "name", NotBlank())
        .field("email", "email", NotBlank(), Email())
        .field("age", "age", Min(0)).groups(OnCreate)
        .build()
    )

    match user_validator.validate(user, OnCreate):
        case Success():
            ...
        case Failure(violations=violations):
            ...
"""

from .builder import Builder, Composite, Entry, Step, validator
from .context import validation_context
from .core import (
    Check,
    Satisfies,
    adapt,
    all_of,
    any_of,
    as_field,
    attr,
    negate,
    relabel,
    to_check,
)
from .errors import BuilderError, UnregisteredTypeError, ValidationFailed, ValidyError
from .groups import DEFAULT, Group
from .interop import after_validator, path_to_loc, to_error_details
from .registry import Registry
from .rules import (
    After,
    Alpha,
    Before,
    Between,
    Contains,
    EachElement,
    Email,
    EndsWith,
    EqualTo,
    Future,
    FutureOrPresent,
    Gt,
    IsInstance,
    Length,
    Lt,
    Matches,
    Max,
    MaxLength,
    MaxSize,
    Min,
    MinLength,
    MinSize,
    NonNegative,
    NotBlank,
    NotEmpty,
    NotNone,
    NotNull,
    Numeric,
    OneOf,
    Past,
    PastOrPresent,
    Positive,
    StartsWith,
    Url,
    Uuid,
)
from .types import (
    ROOT,
    Failure,
    Outcome,
    Success,
    Violation,
    failure,
    is_valid,
    merge,
    merge_all,
    success,
)

__all__ = [
    # Result types
    "ROOT",
    "Violation",
    "Success",
    "Failure",
    "Outcome",
    "success",
    "failure",
    "merge",
    "merge_all",
    "is_valid",
    # Core
    "Check",
    "to_check",
    "all_of",
    "any_of",
    "negate",
    "relabel",
    "adapt",
    "as_field",
    "attr",
    "Satisfies",
    # Builder
    "validator",
    "Builder",
    "Step",
    "Entry",
    "Composite",
    # Groups
    "Group",
    "DEFAULT",
    # Checks
    "NotNull",
    "NotBlank",
    "MinLength",
    "MaxLength",
    "Length",
    "Matches",
    "Email",
    "Url",
    "Uuid",
    "Numeric",
    "Alpha",
    "StartsWith",
    "EndsWith",
    "Contains",
    "OneOf",
    "Min",
    "Max",
    "Between",
    "Gt",
    "Lt",
    "Positive",
    "NonNegative",
    "NotEmpty",
    "MinSize",
    "MaxSize",
    "EachElement",
    "NotNone",
    "EqualTo",
    "IsInstance",
    "Future",
    "FutureOrPresent",
    "Past",
    "PastOrPresent",
    "After",
    "Before",
    # Configuration
    "validation_context",
    # Errors
    "ValidyError",
    "BuilderError",
    "ValidationFailed",
    "UnregisteredTypeError",
    # Integration
    "Registry",
    "after_validator",
    "path_to_loc",
    "to_error_details",
]
