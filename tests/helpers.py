"""Domain types and validator factories shared across tests."""

from dataclasses import dataclass, field
from typing import Optional

from validy import (
    Between,
    Email,
    Group,
    Length,
    Matches,
    MaxLength,
    MaxSize,
    MinLength,
    NotBlank,
    NotEmpty,
    Satisfies,
    failure,
    success,
    validator,
)

OnCreate = Group("OnCreate")
OnUpdate = Group("OnUpdate")


@dataclass(frozen=True)
class Address:
    street: Optional[str]
    city: Optional[str]
    zip: Optional[str]


@dataclass(frozen=True)
class User:
    name: Optional[str]
    email: Optional[str]
    age: int
    password: Optional[str]
    confirm_password: Optional[str]
    address: Optional[Address]
    roles: Optional[list[str]] = field(default_factory=list)
    id: Optional[str] = None


def strong_password():
    return (
        MinLength(8)
        & Matches(r".*[A-Z].*").with_message("must contain an uppercase letter")
        & Matches(r".*[0-9].*").with_message("must contain a digit")
        & Matches(r".*[!@#$%^&*].*").with_message("must contain a special character")
    )


def us_zip():
    return Matches(r"\d{5}(-\d{4})?").with_message("must be a valid US ZIP code")


def passwords_match(user: User):
    if user.password == user.confirm_password:
        return success()
    return failure("confirmPassword", "passwords do not match")


def make_address_validator():
    return (
        validator(Address)
        .field("street", "street", NotBlank(), MaxLength(200))
        .field("city", "city", NotBlank(), MaxLength(100))
        .field("zip", "zip", NotBlank(), us_zip())
        .build()
    )


def make_user_validator(address_validator):
    return (
        validator(User)
        .field("name", "name", NotBlank(), Length(2, 100))
        .field("email", "email", NotBlank(), Email())
        .field("age", "age", Between(0, 150))
        .field("password", "password", strong_password())
        .field("roles", "roles", NotEmpty(), MaxSize(10))
        .rule(passwords_match)
        .when(
            lambda u: "SENIOR" in (u.roles or []),
            Satisfies(lambda u: u.age >= 65, "SENIOR role requires age >= 65"),
        )
        .nested("address", "address", address_validator)
        .field("id", "id", NotBlank())
        .groups(OnUpdate)
        .build()
    )
