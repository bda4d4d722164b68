"""
Tests for the Outcome type and its merge law.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from validy import (
    ROOT,
    Failure,
    Success,
    ValidationFailed,
    Violation,
    failure,
    is_valid,
    merge,
    merge_all,
    success,
)

violations = st.builds(
    Violation,
    st.text(alphabet="abc.[]0123$", max_size=6),
    st.text(max_size=12),
)
outcomes = st.one_of(
    st.just(Success()),
    st.lists(violations, min_size=1, max_size=4).map(lambda vs: Failure(tuple(vs))),
)


class TestOutcome:
    def test_success_is_valid(self):
        assert is_valid(success())
        assert success().is_valid()
        assert not success().is_invalid()
        assert bool(success())

    def test_failure_has_one_violation(self):
        result = failure("name", "must not be blank")
        assert isinstance(result, Failure)
        assert result.violations == (Violation("name", "must not be blank"),)
        assert not is_valid(result)
        assert not result

    def test_empty_failure_rejected(self):
        with pytest.raises(ValueError):
            Failure(())

    def test_list_is_normalized_to_tuple(self):
        result = Failure([Violation(ROOT, "x")])
        assert isinstance(result.violations, tuple)

    def test_immutable(self):
        result = failure(ROOT, "x")
        with pytest.raises(AttributeError):
            result.violations = ()

    def test_pattern_matching(self):
        match failure("age", "must be >= 0"):
            case Success():
                matched = None
            case Failure(violations=vs):
                matched = vs[0].path
        assert matched == "age"

    def test_accessors(self):
        result = Failure(
            (Violation("name", "must not be blank"), Violation(ROOT, "bad"))
        )
        assert result.paths() == ["name", ROOT]
        assert result.messages() == ["must not be blank", "bad"]
        assert result.to_list() == [
            {"path": "name", "message": "must not be blank"},
            {"path": ROOT, "message": "bad"},
        ]

    def test_summary(self):
        result = Failure((Violation("name", "must not be blank"),))
        assert result.summary() == "Validation failed:\n• [name] must not be blank"

    def test_violation_str(self):
        assert str(Violation("address.zip", "bad")) == "[address.zip] bad"

    def test_raise_if_invalid(self):
        assert success().raise_if_invalid() is None
        result = failure("name", "must not be blank")
        with pytest.raises(ValidationFailed) as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.failure == result
        assert exc_info.value.violations == result.violations
        assert "[name] must not be blank" in str(exc_info.value)


class TestMerge:
    def test_success_success(self):
        assert merge(success(), success()) == success()

    def test_success_failure(self):
        f = failure("a", "x")
        assert merge(success(), f) == f
        assert merge(f, success()) == f

    def test_failure_failure_concatenates_in_order(self):
        left = failure("a", "first")
        right = failure("b", "second")
        merged = merge(left, right)
        assert merged.violations == (
            Violation("a", "first"),
            Violation("b", "second"),
        )

    def test_merge_all_empty_is_success(self):
        assert merge_all([]) == success()

    def test_merge_all_keeps_order(self):
        merged = merge_all([failure("a", "1"), success(), failure("b", "2")])
        assert merged.paths() == ["a", "b"]

    @given(outcomes)
    def test_identity(self, o):
        assert merge(success(), o) == o
        assert merge(o, success()) == o

    @given(outcomes, outcomes, outcomes)
    def test_associativity(self, o1, o2, o3):
        assert merge(merge(o1, o2), o3) == merge(o1, merge(o2, o3))

    @given(outcomes, outcomes)
    def test_violation_count_adds_up(self, o1, o2):
        def count(o):
            return len(o.violations) if isinstance(o, Failure) else 0

        assert count(merge(o1, o2)) == count(o1) + count(o2)
