__version__ = "0.1.0"

from multicurrency.domain.monetary.currency import Currency, CurrencyType
from multicurrency.domain.monetary.money import ExchangeRateFunction, Money, MoneySum, ScalarMoney

__all__ = ["Currency", "CurrencyType", "ExchangeRateFunction", "Money", "MoneySum", "ScalarMoney"]
