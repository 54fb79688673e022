from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal`.

    Floats go through `str` so that `0.1` becomes `Decimal("0.1")` and not its binary expansion.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        InvalidOperation: If $value has no decimal representation.
        TypeError: If $value is a `bool`.
    """
    if isinstance(value, Decimal):
        return value

    # Raise: bool is an int subclass, but True/False are never monetary amounts
    if isinstance(value, bool):
        raise TypeError(f"$value must be Decimal-like, but provided value is: {value}")

    return Decimal(str(value))


def try_as_decimal(value: object) -> Decimal | None:
    """Converts a numeric operand to a finite `Decimal`, or returns None.

    Only `Decimal`, `int` and `float` are accepted; strings, bools, NaN and Infinity give None.
    Operator methods use this to return `NotImplemented` for foreign operands.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        return None
    try:
        decimal_value = as_decimal(value)
    except (ValueError, TypeError, InvalidOperation):
        return None
    return decimal_value if decimal_value.is_finite() else None
