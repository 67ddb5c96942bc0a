from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

_T = TypeVar("_T")
_U = TypeVar("_U")

Comparer: TypeAlias = Callable[[_T, _T], bool]
# An equality comparer: returns whether its two arguments should be considered the same item.

Predicate: TypeAlias = Callable[[_T], bool]

OrderComparer: TypeAlias = Callable[[_T, _T], int]
# An ordering function: negative if the first argument goes first, positive if it goes last, and
# zero if both are equivalent.

Selector: TypeAlias = Callable[[_T], _U]

Action: TypeAlias = Callable[[_T, int], Any]
# Called with an element and its index.


def default_comparer(a: Any, b: Any) -> bool:
    """Compares two items with ``==``. An item is always equal to itself, as in ``list``."""

    return a is b or bool(a == b)
