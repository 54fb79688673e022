from __future__ import annotations

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """Anything that can be ordered with `<`.

    `str`, `Currency` and ordered enums all qualify.
    """

    def __lt__(self, other: Any, /) -> bool: ...


CurrencyT = TypeVar("CurrencyT", bound=Comparable)


def compare_currencies(left: CurrencyT, right: CurrencyT) -> int:
    """Three-way comparison of two currency identifiers using only `<`.

    Returns:
        int: Negative if $left sorts first, positive if $right sorts first, 0 otherwise.
    """
    if left < right:
        return -1
    if right < left:
        return 1
    return 0
