from __future__ import annotations

import dataclasses
from decimal import Decimal
from fractions import Fraction

import pytest

from lib_assertions.matchers import OrderingMatcher, at_least, at_most, greater_than, less_than


@pytest.mark.parametrize(
    ("factory", "symbol"),
    [(greater_than, ">"), (at_least, ">="), (less_than, "<"), (at_most, "<=")],
)
def test_description_names_relation_and_expected(factory, symbol) -> None:
    assert str(factory(5)) == f"a number {symbol} 5"


@pytest.mark.parametrize(
    ("factory", "actual", "matches"),
    [
        (greater_than, 6, True),
        (greater_than, 5, False),
        (greater_than, 4, False),
        (at_least, 5, True),
        (at_least, 4, False),
        (less_than, 4, True),
        (less_than, 5, False),
        (at_most, 5, True),
        (at_most, 6, False),
    ],
)
def test_relations(factory, actual, matches) -> None:
    assert (factory(5).match(actual) is None) is matches


def test_matcher_is_immutable() -> None:
    matcher = greater_than(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        matcher.symbol = "<"  # type: ignore[misc]


def test_type_mismatch_is_reported() -> None:
    mismatch = greater_than(5).match(6.0)
    assert mismatch is not None
    description = mismatch.describe()
    assert "a number > 5" in description
    assert "expected an instance of int" in description
    assert "got float" in description


def test_non_numeric_actual_is_reported() -> None:
    mismatch = at_most(1.5).match("1")
    assert mismatch is not None
    assert "a number <= 1.5" in mismatch.describe()


@pytest.mark.parametrize(
    ("expected", "actual"),
    [
        (1.0, float("nan")),
        (Decimal("1"), Decimal("NaN")),
        (Decimal("1"), Decimal("sNaN")),
    ],
)
def test_nan_is_not_orderable(expected, actual) -> None:
    for factory in (greater_than, at_least, less_than, at_most):
        mismatch = factory(expected).match(actual)
        assert mismatch is not None
        assert "not orderable" in mismatch.describe()


def test_nan_expected_is_not_orderable() -> None:
    mismatch = at_least(float("nan")).match(1.0)
    assert mismatch is not None
    assert at_most(Decimal("sNaN")).match(Decimal("1")) is not None


def test_subclass_of_expected_type_is_accepted() -> None:
    # bool is an int subclass
    assert greater_than(0).match(True) is None


def test_other_number_types() -> None:
    assert greater_than(Decimal("1.5")).match(Decimal("2")) is None
    assert less_than(Fraction(1, 2)).match(Fraction(1, 3)) is None
    assert at_least(Decimal("NaN")).match(Decimal("1")) is not None


def test_huge_integers_compare() -> None:
    assert greater_than(10**400).match(10**400 + 1) is None


def test_custom_predicate() -> None:
    matcher = OrderingMatcher(3, lambda cmp: cmp == 0, "==")
    assert matcher.match(3) is None
    assert matcher.match(4).describe() == "4 is not a number == 3"
