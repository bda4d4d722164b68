import pytest
from helpers import Address, User, make_address_validator, make_user_validator


@pytest.fixture(scope="function")
def address_validator():
    return make_address_validator()


@pytest.fixture(scope="function")
def user_validator(address_validator):
    return make_user_validator(address_validator)


@pytest.fixture(scope="function")
def valid_address() -> Address:
    return Address("10 Downing Street", "London", "12345")


@pytest.fixture(scope="function")
def valid_user(valid_address) -> User:
    return User(
        name="Alice Dupont",
        email="alice@example.com",
        age=30,
        password="S3cur3!Pass",
        confirm_password="S3cur3!Pass",
        address=valid_address,
        roles=["USER", "ADMIN"],
    )
