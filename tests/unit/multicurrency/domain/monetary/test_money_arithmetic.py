from decimal import Decimal

import pytest

from multicurrency.domain.monetary.currency_registry import CHF, EUR, GBP, USD
from multicurrency.domain.monetary.money import Money, MoneySum, ScalarMoney

# Constants
CHF_3 = Money.scalar(3, CHF)
EUR_10 = Money.scalar(10, EUR)
GBP_7 = Money.scalar(7, GBP)
USD_2 = Money.scalar(2, USD)
USD_5 = Money.scalar(5, USD)


def _assert_flat(value: Money) -> None:
    if value.is_sum:
        assert all(isinstance(term, ScalarMoney) for term in value.terms)


# region Addition

def test_adding_two_scalars_builds_sorted_sum():
    total = USD_5 + EUR_10

    assert isinstance(total, MoneySum)
    assert total.terms == (EUR_10, USD_5)


def test_addition_never_merges_same_currency_terms():
    total = USD_5 + USD_2

    assert len(total) == 2
    assert total.terms == (USD_2, USD_5)


@pytest.mark.parametrize(
    "left, right, expected_terms",
    [
        (USD_5 + EUR_10, CHF_3, (CHF_3, EUR_10, USD_5)),  # sum + scalar
        (CHF_3, USD_5 + EUR_10, (CHF_3, EUR_10, USD_5)),  # scalar + sum
        (USD_5 + EUR_10, GBP_7 + CHF_3, (CHF_3, EUR_10, GBP_7, USD_5)),  # sum + sum
    ],
)
def test_addition_flattens_sums(left, right, expected_terms):
    total = left + right

    assert total.terms == expected_terms
    _assert_flat(total)


def test_addition_is_commutative():
    assert USD_5 + EUR_10 == EUR_10 + USD_5
    assert (USD_5 + EUR_10) + CHF_3 == CHF_3 + (EUR_10 + USD_5)


@pytest.mark.parametrize(
    "a, b, c",
    [
        (USD_5, EUR_10, CHF_3),
        (USD_5 + GBP_7, EUR_10, CHF_3),
        (USD_5, EUR_10 + GBP_7, CHF_3 + USD_2),
        (USD_5, USD_5, USD_2),
    ],
)
def test_addition_is_associative(a, b, c):
    assert (a + b) + c == a + (b + c)


def test_repeated_additions_stay_flat():
    total = USD_5
    for term in [EUR_10, CHF_3, USD_5 + GBP_7, EUR_10 + USD_2, GBP_7]:
        total = total + term
        _assert_flat(total)

    assert len(total) == 8


def test_addition_does_not_modify_operands():
    left = USD_5 + EUR_10
    terms_before = left.terms

    _ = left + CHF_3
    _ = left - GBP_7

    assert left.terms == terms_before
    assert USD_5.value == Decimal(5)


def test_adding_non_money_is_unsupported():
    with pytest.raises(TypeError):
        USD_5 + 5
    with pytest.raises(TypeError):
        5 + USD_5
    with pytest.raises(TypeError):
        sum([USD_5, EUR_10])

# endregion


# region Negation and subtraction

def test_negating_scalar_flips_value():
    assert -USD_5 == Money.scalar(-5, USD)


def test_negating_sum_resorts_terms():
    total = USD_2 + USD_5

    assert (-total).terms == (Money.scalar(-5, USD), Money.scalar(-2, USD))


@pytest.mark.parametrize("value", [USD_5, USD_5 + EUR_10, USD_2 + USD_5 + CHF_3])
def test_negation_is_an_involution(value):
    assert -(-value) == value


def test_subtraction_adds_the_negation():
    assert USD_5 - EUR_10 == USD_5 + Money.scalar(-10, EUR)
    assert (USD_5 + GBP_7) - (EUR_10 + USD_2) == USD_5 + GBP_7 + -EUR_10 + -USD_2


def test_subtracting_a_value_from_itself_keeps_both_terms():
    difference = USD_5 - USD_5

    assert difference.terms == (Money.scalar(-5, USD), USD_5)
    assert difference.amount(USD, lambda src, dst: Decimal(1)) == Decimal(0)


def test_unary_plus_returns_equal_value():
    total = USD_5 + EUR_10

    assert +USD_5 == USD_5
    assert +total == total
    assert +total is not total

# endregion


# region Multiplication

@pytest.mark.parametrize(
    "factor, expected",
    [
        (3, Decimal(15)),
        (Decimal("0.5"), Decimal("2.5")),
        (0.1, Decimal("0.5")),
        (Decimal("-2"), Decimal(-10)),
    ],
)
def test_scalar_multiplication(factor, expected):
    assert USD_5 * factor == Money.scalar(expected, USD)
    assert factor * USD_5 == Money.scalar(expected, USD)


def test_multiplying_sum_scales_every_term():
    total = (USD_5 + EUR_10) * 2

    assert total == Money.scalar(20, EUR) + Money.scalar(10, USD)


def test_multiplying_sum_by_negative_factor_resorts_terms():
    total = USD_2 + USD_5

    assert (total * -1).terms == (Money.scalar(-5, USD), Money.scalar(-2, USD))
    assert total * -1 == -total


@pytest.mark.parametrize("factor", [USD_2, "two", "3", None, True, object(), Decimal("NaN"), Decimal("Infinity"), float("nan")])
def test_multiplying_by_non_numeric_or_non_finite_factor_is_unsupported(factor):
    with pytest.raises(TypeError):
        USD_5 * factor
    with pytest.raises(TypeError):
        (USD_5 + EUR_10) * factor

# endregion
