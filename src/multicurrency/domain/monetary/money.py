from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from decimal import Decimal, InvalidOperation
from types import NotImplementedType
from typing import Generic, TypeAlias

from multicurrency.domain.monetary.comparable import CurrencyT, compare_currencies
from multicurrency.utils.numeric_tools import DecimalLike, as_decimal, try_as_decimal

logger = logging.getLogger(__name__)

# Returns the multiplicative rate converting an amount in the first currency into the second
ExchangeRateFunction: TypeAlias = Callable[[CurrencyT, CurrencyT], Decimal]


class Money(ABC, Generic[CurrencyT]):
    """Monetary value: either a single amount in one currency, or a sum of such amounts.

    There are exactly two shapes:

    - `ScalarMoney`: one `Decimal` value in one currency.
    - `MoneySum`: a flat, sorted tuple of `ScalarMoney` terms, produced by adding values.
      Different currencies stay side by side until `amount` reduces them with a caller
      supplied exchange-rate function.

    Values are immutable and every operator returns a new value.

    Equality is shape-sensitive: a `ScalarMoney` never equals a `MoneySum`, even a sum
    whose terms reduce to the same amount. Terms are never merged, so
    `Money.scalar(5, USD) + Money.scalar(0, USD)` is a two-term sum.

    Ordering (`compare_to`, `<`, ...) puts scalars before sums. Scalars compare by
    currency, then by value; sums compare term by term. When one sum's terms are a
    prefix of the other's, `compare_to` returns 0 although the sums are not equal.

    Examples:
        >>> total = Money.scalar(10, USD) + Money.scalar(20, EUR)
        >>> total.amount(USD, lambda src, dst: Decimal("1.1") if src != dst else Decimal(1))
        Decimal('32.0')
    """

    __slots__ = ()

    @staticmethod
    def scalar(value: DecimalLike, currency: CurrencyT) -> ScalarMoney[CurrencyT]:
        """Create a single-currency value. Same as `ScalarMoney(value, currency)`."""
        return ScalarMoney(value, currency)

    @property
    @abstractmethod
    def is_sum(self) -> bool:
        """True for a `MoneySum`, False for a `ScalarMoney`."""

    @abstractmethod
    def compare_to(self, other: Money[CurrencyT]) -> int:
        """Compare with $other under the Money total order.

        Returns:
            int: Negative if this value sorts first, positive if $other sorts first, 0 otherwise.
        """

    def amount(self, target: CurrencyT, xchg: ExchangeRateFunction[CurrencyT] | None) -> Decimal:
        """Reduce this value to one `Decimal` amount in $target currency.

        Each term is converted as `xchg(term_currency, target) * term_value`, and the results
        are summed. $xchg is called once per term; rates are not cached.

        Args:
            target: Currency to express the result in.
            xchg: Exchange-rate function `(from_currency, to_currency) -> rate`.

        Returns:
            Decimal: Amount in $target currency.

        Raises:
            ValueError: If $xchg is None.
            TypeError: If $xchg is not callable.
        """
        # Raise: nothing can be converted without exchange rates
        if xchg is None:
            raise ValueError("Cannot call `amount` because $xchg is None")
        if not callable(xchg):
            raise TypeError(f"Cannot call `amount` because $xchg ({xchg!r}) is not callable")

        return self._reduce(target, xchg)

    @abstractmethod
    def _reduce(self, target: CurrencyT, xchg: ExchangeRateFunction[CurrencyT]) -> Decimal: ...

    @abstractmethod
    def _terms(self) -> tuple[ScalarMoney[CurrencyT], ...]:
        """Terms this value contributes to a sum."""

    @abstractmethod
    def _scaled(self, factor: Decimal) -> Money[CurrencyT]: ...

    # region Arithmetic

    def __add__(self, other: object) -> MoneySum[CurrencyT] | NotImplementedType:
        """Combine two values into a flat sum; terms of the same currency are kept separate."""
        if not isinstance(other, Money):
            return NotImplemented
        return MoneySum(self._terms() + other._terms())

    def __sub__(self, other: object) -> MoneySum[CurrencyT] | NotImplementedType:
        if not isinstance(other, Money):
            return NotImplemented
        return self + -other

    def __mul__(self, other: object) -> Money[CurrencyT] | NotImplementedType:
        """Multiply by a finite Decimal, int or float constant. Money * Money is not supported."""
        if isinstance(other, Money):
            return NotImplemented
        factor = try_as_decimal(other)
        if factor is None:
            return NotImplemented
        return self._scaled(factor)

    def __rmul__(self, other: object) -> Money[CurrencyT] | NotImplementedType:
        return self.__mul__(other)

    @abstractmethod
    def __neg__(self) -> Money[CurrencyT]: ...

    @abstractmethod
    def __pos__(self) -> Money[CurrencyT]: ...

    # endregion

    # region Comparison

    def __lt__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    def _check_comparable(self, other: object) -> None:
        # Raise: `compare_to` is defined only between Money values
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `compare_to` because $other must be Money, but provided value is: {other!r}")

    # endregion


class ScalarMoney(Money[CurrencyT]):
    """A single amount in a single currency."""

    __slots__ = ("_value", "_currency")

    def __init__(self, value: DecimalLike, currency: CurrencyT):
        """Initialize ScalarMoney with value and currency.

        Args:
            value: Amount (Decimal-like scalar). Kept at full precision, never rounded.
            currency: Currency identifier; any type supporting `<`.

        Raises:
            ValueError: If $value cannot be converted to Decimal or is NaN / Infinity.
        """
        # Raise: $value must be convertible to Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `ScalarMoney` because $value ({value!r}) cannot be converted to Decimal") from e

        # Raise: NaN and Infinity cannot be ordered or summed
        if not decimal_value.is_finite():
            raise ValueError(f"$value must be finite, but provided value is: {value!r}")

        self._value = decimal_value
        self._currency = currency

    @property
    def value(self) -> Decimal:
        return self._value

    @property
    def currency(self) -> CurrencyT:
        return self._currency

    @property
    def is_sum(self) -> bool:
        return False

    def compare_to(self, other: Money[CurrencyT]) -> int:
        self._check_comparable(other)
        if not isinstance(other, ScalarMoney):
            return -1  # scalars sort before sums

        by_currency = compare_currencies(self._currency, other._currency)
        if by_currency != 0:
            return by_currency
        return (self._value > other._value) - (self._value < other._value)

    def _reduce(self, target: CurrencyT, xchg: ExchangeRateFunction[CurrencyT]) -> Decimal:
        return as_decimal(xchg(self._currency, target)) * self._value

    def _terms(self) -> tuple[ScalarMoney[CurrencyT], ...]:
        return (self,)

    def _scaled(self, factor: Decimal) -> ScalarMoney[CurrencyT]:
        return ScalarMoney(self._value * factor, self._currency)

    def __neg__(self) -> ScalarMoney[CurrencyT]:
        return ScalarMoney(-self._value, self._currency)

    def __pos__(self) -> ScalarMoney[CurrencyT]:
        return ScalarMoney(self._value, self._currency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarMoney):
            return False
        return self._value == other._value and compare_currencies(self._currency, other._currency) == 0

    def __hash__(self) -> int:
        return hash((self._value, self._currency))

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self._value} {self._currency}"

    def __repr__(self) -> str:
        """Return string like 'ScalarMoney(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._value}, {self._currency})"


class MoneySum(Money[CurrencyT]):
    """Unevaluated total of scalar terms, possibly in different currencies.

    Built by the arithmetic operators of `Money`; not meant to be constructed directly.
    Terms are stored sorted, so `a + b` and `b + a` are structurally identical.
    """

    __slots__ = ("_terms_tuple",)

    def __init__(self, terms: Iterable[ScalarMoney[CurrencyT]]):
        terms = tuple(terms)
        assert all(isinstance(term, ScalarMoney) for term in terms), "MoneySum terms must be ScalarMoney; nested sums are not allowed"

        self._terms_tuple: tuple[ScalarMoney[CurrencyT], ...] = tuple(sorted(terms))

    @property
    def terms(self) -> tuple[ScalarMoney[CurrencyT], ...]:
        """Terms in canonical order."""
        return self._terms_tuple

    @property
    def is_sum(self) -> bool:
        return True

    def compare_to(self, other: Money[CurrencyT]) -> int:
        self._check_comparable(other)
        if not isinstance(other, MoneySum):
            return 1

        # First differing pair decides; a shorter prefix compares as 0
        for mine, theirs in zip(self._terms_tuple, other._terms_tuple):
            result = mine.compare_to(theirs)
            if result != 0:
                return result
        return 0

    def _reduce(self, target: CurrencyT, xchg: ExchangeRateFunction[CurrencyT]) -> Decimal:
        logger.debug(f"Reducing MoneySum with {len(self._terms_tuple)} term(s) to {target}")
        return sum((term._reduce(target, xchg) for term in self._terms_tuple), Decimal(0))

    def _terms(self) -> tuple[ScalarMoney[CurrencyT], ...]:
        return self._terms_tuple

    def _scaled(self, factor: Decimal) -> MoneySum[CurrencyT]:
        # Re-sorted on construction: a negative factor reverses the order within a currency
        return MoneySum(term._scaled(factor) for term in self._terms_tuple)

    def __neg__(self) -> MoneySum[CurrencyT]:
        return MoneySum(-term for term in self._terms_tuple)

    def __pos__(self) -> MoneySum[CurrencyT]:
        return MoneySum(self._terms_tuple)

    def __len__(self) -> int:
        return len(self._terms_tuple)

    def __iter__(self) -> Iterator[ScalarMoney[CurrencyT]]:
        return iter(self._terms_tuple)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoneySum):
            return False
        if len(self._terms_tuple) != len(other._terms_tuple):
            return False
        return all(mine == theirs for mine, theirs in zip(self._terms_tuple, other._terms_tuple))

    def __hash__(self) -> int:
        return hash(self._terms_tuple)

    def __str__(self) -> str:
        """Return string like '10.00 EUR + 5 USD'."""
        return " + ".join(str(term) for term in self._terms_tuple)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(term) for term in self._terms_tuple)})"
