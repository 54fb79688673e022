from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering
from types import NotImplementedType

logger = logging.getLogger(__name__)


class CurrencyType(Enum):
    """Kind of asset a currency code stands for."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


@total_ordering
class Currency:
    """Currency identifier usable as the currency type of `Money`.

    Currencies are identified and ordered by their code, so `Currency("EUR", ...)` sorts
    before `Currency("USD", ...)`. Precision is descriptive metadata only; `Money` never
    rounds values to it.

    Attributes:
        code (str): Upper-case currency code (e.g., "USD", "BTC").
        precision (int): Customary number of decimal places (0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): FIAT, CRYPTO or COMMODITY.
    """

    __slots__ = ("_code", "_precision", "_name", "_currency_type")

    # Class-level registry of known currencies, keyed by code
    _registry: dict[str, Currency] = {}

    def __init__(self, code: str, precision: int, name: str, currency_type: CurrencyType):
        """Initialize a Currency instance.

        Raises:
            ValueError: If $code, $precision or $name are invalid.
            TypeError: If $currency_type is not a CurrencyType instance.
        """
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # Raise: bool passes isinstance(int), reject it explicitly
        if not isinstance(precision, int) or isinstance(precision, bool) or not 0 <= precision <= 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        return self._code

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def name(self) -> str:
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        return self._currency_type

    # region Registry

    @classmethod
    def register(cls, currency: Currency, overwrite: bool = False) -> None:
        """Register $currency so it can be looked up by code with `from_str`.

        Raises:
            TypeError: If $currency is not a Currency instance.
            ValueError: If the code is already registered and $overwrite is False.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry:
            if not overwrite:
                raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")
            logger.debug(f"Overwriting registered Currency with code '{currency.code}'")

        cls._registry[currency.code] = currency

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Look up a registered currency by $code (case-insensitive).

        Raises:
            TypeError: If $code is not a string.
            ValueError: If no currency with $code is registered.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {sorted(cls._registry)}")

        return cls._registry[code]

    # endregion

    # region Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return False
        return self._code == other._code

    def __lt__(self, other: object) -> bool | NotImplementedType:
        """Return True if this currency's code sorts before the code of $other."""
        if not isinstance(other, Currency):
            return NotImplemented
        return self._code < other._code

    def __hash__(self) -> int:
        return hash(self._code)

    # endregion

    def __str__(self) -> str:
        return self._code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._code}', {self._precision}, '{self._name}', {self._currency_type})"
