"""
Tests for validation groups and the group filter applied by Composite.validate.
"""

from dataclasses import replace

from helpers import Address, OnCreate, OnUpdate, User

from validy import DEFAULT, ROOT, Group, NotBlank, failure, success, validator
from validy.groups import is_active, normalize_groups

OnPublish = Group("OnPublish")


def scoped_validator():
    return (
        validator()
        .field("name", "name", NotBlank())
        .rule(lambda _: failure("create", "create rule"))
        .groups(OnCreate)
        .rule(lambda _: failure("update", "update rule"))
        .groups(OnUpdate)
        .rule(lambda _: failure("either", "either rule"))
        .groups(OnCreate, OnUpdate)
        .rule(lambda _: failure("default", "default rule"))
        .groups(DEFAULT)
        .build()
    )


class TestIsActive:
    def test_empty_groups_always_active(self):
        assert is_active(frozenset(), frozenset())
        assert is_active(frozenset(), frozenset({OnCreate}))

    def test_default_always_active(self):
        assert is_active(frozenset({DEFAULT, OnCreate}), frozenset())

    def test_named_group_needs_request(self):
        assert not is_active(frozenset({OnCreate}), frozenset())
        assert not is_active(frozenset({OnCreate}), frozenset({OnUpdate}))
        assert is_active(frozenset({OnCreate}), frozenset({OnUpdate, OnCreate}))


class TestGroup:
    def test_equality_by_name(self):
        assert Group("OnCreate") == OnCreate
        assert hash(Group("OnCreate")) == hash(OnCreate)
        assert OnCreate != OnUpdate

    def test_normalize_varargs_and_sets(self):
        assert normalize_groups((OnCreate, OnUpdate)) == {OnCreate, OnUpdate}
        assert normalize_groups(({OnCreate},)) == {OnCreate}
        assert normalize_groups(("plain-string",)) == {"plain-string"}

    def test_normalize_flattens_any_iterable(self):
        assert normalize_groups(((g for g in [OnCreate, OnUpdate]),)) == {
            OnCreate,
            OnUpdate,
        }
        assert normalize_groups((map(Group, ["OnCreate"]),)) == {OnCreate}
        assert normalize_groups((b"raw",)) == {b"raw"}


class TestGroupFilter:
    def test_default_only(self):
        result = scoped_validator().validate({"name": ""})
        assert result.paths() == ["name", "default"]

    def test_requested_group_merged_with_default(self):
        result = scoped_validator().validate({"name": ""}, OnCreate)
        assert result.paths() == ["name", "create", "either", "default"]

    def test_other_group(self):
        result = scoped_validator().validate({"name": "x"}, OnUpdate)
        assert result.paths() == ["update", "either", "default"]

    def test_several_groups(self):
        result = scoped_validator().validate({"name": "x"}, OnCreate, OnUpdate)
        assert result.paths() == ["create", "update", "either", "default"]

    def test_group_set_argument(self):
        check = scoped_validator()
        assert check.validate({"name": "x"}, {OnCreate}) == check.validate(
            {"name": "x"}, OnCreate
        )

    def test_group_generator_argument(self):
        result = scoped_validator().validate({"name": "x"}, (g for g in [OnCreate]))
        assert result.paths() == ["create", "either", "default"]

    def test_unknown_group_runs_default_only(self):
        result = scoped_validator().validate({"name": "x"}, OnPublish)
        assert result.paths() == ["default"]

    def test_call_accepts_groups(self):
        assert scoped_validator()({"name": "x"}, OnUpdate).paths()[0] == "update"

    def test_any_hashable_group_id(self):
        check = validator().rule(lambda _: failure(ROOT, "x")).groups("admin").build()
        assert check.validate(1) == success()
        assert check.validate(1, "admin").paths() == [ROOT]

    def test_scenario_on_create(self, user_validator, valid_user):
        on_create = (
            validator()
            .nested("user", lambda v: v, user_validator)
            .field("password", "password", NotBlank())
            .groups(OnCreate)
            .build()
        )
        user = replace(valid_user, password=None, confirm_password=None)
        assert on_create.validate(user).paths() == [
            "user.password",
            "user.password",
            "user.password",
            "user.password",
        ]
        assert on_create.validate(user, OnCreate).paths()[-1] == "password"

    def test_nested_composite_runs_default_entries_only(self, user_validator):
        parent = validator().nested("user", lambda v: v, user_validator).build()
        user = User(
            name="Bob",
            email="bob@example.com",
            age=40,
            password="S3cur3!Pass",
            confirm_password="S3cur3!Pass",
            address=Address("1 Main St", "Springfield", "12345"),
            roles=["USER"],
            id=None,
        )
        assert parent.validate(user, OnUpdate) == success()
        assert user_validator.validate(user, OnUpdate).paths() == ["id"]
