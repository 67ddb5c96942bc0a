r"""
This package provides :class:`~orderedcollection.OrderedCollection`, a mutable, insertion-ordered
container with array-like access, query helpers (``find``, ``any``, ``first``, ...) and functional
transforms (``where``, ``select``, ``distinct``, ...).

Which items are considered the same is decided by an equality comparer provided at construction,
rather than by a fixed notion of equality. By default, items are compared with ``==``.

>>> from orderedcollection import OrderedCollection
>>>
>>> users = OrderedCollection(
...     [{"id": 1, "name": "ada"}, {"id": 2, "name": "bob"}, {"id": 1, "name": "Ada"}],
...     comparer=lambda a, b: a["id"] == b["id"],
... )
>>> users.contains({"id": 2})
True
>>> users.distinct().select(lambda user: user["name"]).to_list()
['ada', 'bob']
"""

from collections.abc import Callable
from warnings import warn as _warn

from ._ordered_collection import OrderedCollection
from ._typing import Action, Comparer, OrderComparer, Predicate, Selector, default_comparer
from ._utils.errors import IndexOutOfRangeError, UnsupportedOperationError

__all__ = [
    "Action",
    "Comparer",
    "IndexOutOfRangeError",
    "OrderComparer",
    "OrderedCollection",
    "Predicate",
    "Selector",
    "UnsupportedOperationError",
    "default_comparer",
]

_deprecated_items: dict[str, tuple[str, Callable]] = {
    "List": ("OrderedCollection", OrderedCollection),
}


def __getattr__(name: str) -> Callable:
    """
    If an attribute is not found in the module's dictionary and its name is in _deprecated_items,
    then return its replacement with a warning.
    """
    if name in _deprecated_items:
        _warn(
            f"`{name}` is deprecated. Please use `{_deprecated_items[name][0]}` instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return _deprecated_items[name][1]
    raise AttributeError(f"module {__name__} has no attribute {name}")
