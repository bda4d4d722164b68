"""
Built-in leaf checks, grouped by the kind of value they inspect.
"""

from .collection import (
    EachElement,
    EqualTo,
    IsInstance,
    MaxSize,
    MinSize,
    NotEmpty,
    NotNone,
)
from .instant import After, Before, Future, FutureOrPresent, Past, PastOrPresent
from .ordinal import Between, Gt, Lt, Max, Min, NonNegative, Positive
from .text import (
    Alpha,
    Contains,
    Email,
    EndsWith,
    Length,
    Matches,
    MaxLength,
    MinLength,
    NotBlank,
    NotNull,
    Numeric,
    OneOf,
    StartsWith,
    Url,
    Uuid,
)

__all__ = [
    # Text
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
    # Ordinal
    "Min",
    "Max",
    "Between",
    "Gt",
    "Lt",
    "Positive",
    "NonNegative",
    # Collection
    "NotEmpty",
    "MinSize",
    "MaxSize",
    "EachElement",
    # General object
    "NotNone",
    "EqualTo",
    "IsInstance",
    # Instant
    "Future",
    "FutureOrPresent",
    "Past",
    "PastOrPresent",
    "After",
    "Before",
]
