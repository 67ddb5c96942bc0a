from __future__ import annotations

import locale
from collections.abc import Collection, Iterable, Iterator, Reversible
from functools import cmp_to_key
from typing import Any, TypeVar, overload

from ._typing import Action, Comparer, OrderComparer, Predicate, Selector, default_comparer
from ._utils.capabilities import all_numeric, all_primitive, all_textual
from ._utils.checks import check_element_index, check_insertion_index
from ._utils.errors import UnsupportedOperationError
from ._utils.str import items_to_str

_T = TypeVar("_T")
_U = TypeVar("_U")
_D = TypeVar("_D")

_NAN_KEY = object()


class OrderedCollection(Reversible[_T], Collection[_T]):
    """
    Mutable, insertion-ordered collection of elements, whose notion of item identity is given by a
    pluggable equality comparer.

    The comparer is used by every operation that needs to decide whether two items are the same:
    :meth:`contains` (and ``in``), :meth:`index_of`, :meth:`remove`, :meth:`distinct` and ``==``.
    Operations taking an explicit predicate or ordering use it instead.

    The collection owns its storage: it copies ``source`` when created, and every method returning a
    container returns a new one. Elements themselves are never copied.

    :param source: The initial elements, in order. Defaults to no elements.
    :param comparer: The equality comparer. Defaults to comparing items with ``==``.

    >>> from orderedcollection import OrderedCollection
    >>>
    >>> collection = OrderedCollection([3, 1, 2, 3])
    >>> collection.add(4).insert(0, 0)
    OrderedCollection([0, 3, 1, 2, 3, 4])
    >>> collection.distinct().sort()
    OrderedCollection([0, 1, 2, 3, 4])
    >>> collection.where(lambda x: x % 2 == 1).select(lambda x: x * 10).to_list()
    [30, 10, 30]
    """

    def __init__(self, source: Iterable[_T] | None = None, comparer: Comparer[_T] | None = None):
        self._items: list[_T] = list(source) if source is not None else []
        self._comparer: Comparer[_T] = comparer if comparer is not None else default_comparer

    # Properties

    @property
    def count(self) -> int:
        """The number of elements."""

        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return len(self._items) == 0

    @property
    def comparer(self) -> Comparer[_T]:
        """The equality comparer deciding item identity."""

        return self._comparer

    # Iteration

    def iterate(self) -> Iterator[_T]:
        """
        Returns a new iterator over the elements, in order. Each call gives an independent iterator.
        The collection must not be modified while iterating.
        """

        yield from self._items

    def iterate_reverse(self) -> Iterator[_T]:
        """
        Returns a new iterator over the elements, in reverse order. Nothing is yielded if the
        collection is empty.
        """

        yield from reversed(self._items)

    def __iter__(self) -> Iterator[_T]:
        return self.iterate()

    def __reversed__(self) -> Iterator[_T]:
        return self.iterate_reverse()

    # Modification

    def add(self, item: _T) -> OrderedCollection[_T]:
        """Appends ``item`` at the end and returns the collection."""

        self._items.append(item)
        return self

    def add_range(self, items: Iterable[_T] | None) -> OrderedCollection[_T]:
        """Appends all ``items`` at the end, in order. Nothing happens if ``items`` is ``None``."""

        if items is None:
            return self

        # Materialize first so that a failing iterable leaves the collection unchanged.
        self._items.extend(list(items))
        return self

    def insert(self, index: int, item: _T) -> OrderedCollection[_T]:
        """
        Inserts ``item`` so that it ends up at position ``index``.

        :param index: The insertion position, in ``[0, count]``. ``count`` appends.
        :param item: The item to insert.
        """

        check_insertion_index(index, len(self._items))
        self._items.insert(index, item)
        return self

    def remove(self, item: _T) -> bool:
        """
        Removes the first element considered equal to ``item`` by the comparer. Returns whether an
        element was removed.
        """

        index = self.index_of(item)
        if index < 0:
            return False

        del self._items[index]
        return True

    def remove_all(self, predicate: Predicate[_T]) -> int:
        """Removes every element satisfying ``predicate`` and returns how many were removed."""

        survivors = [element for element in self._items if not predicate(element)]
        n_removed = len(self._items) - len(survivors)
        self._items[:] = survivors
        return n_removed

    def remove_at(self, index: int) -> OrderedCollection[_T]:
        check_element_index(index, len(self._items))
        del self._items[index]
        return self

    def clear(self) -> OrderedCollection[_T]:
        self._items.clear()
        return self

    def reverse(self) -> OrderedCollection[_T]:
        """Reverses the order of the elements in place."""

        self._items.reverse()
        return self

    # Query

    def contains(self, item: _T) -> bool:
        return self.index_of(item) >= 0

    def index_of(self, item: _T) -> int:
        """
        Returns the index of the first element considered equal to ``item`` by the comparer, or
        ``-1`` if there is none.
        """

        for i, element in enumerate(self._items):
            if self._comparer(element, item):
                return i
        return -1

    def find(self, predicate: Predicate[_T]) -> _T | None:
        return self.first_or_default(predicate)

    def find_index(self, predicate: Predicate[_T]) -> int:
        for i, element in enumerate(self._items):
            if predicate(element):
                return i
        return -1

    def any(self, predicate: Predicate[_T] | None = None) -> bool:
        """
        Returns whether some element satisfies ``predicate``, or, without ``predicate``, whether the
        collection has any element.
        """

        if predicate is None:
            return len(self._items) > 0
        return any(predicate(element) for element in self._items)

    def all(self, predicate: Predicate[_T]) -> bool:
        """Returns whether every element satisfies ``predicate``. True on an empty collection."""

        return all(predicate(element) for element in self._items)

    def first(self, predicate: Predicate[_T] | None = None) -> _T | None:
        """
        Returns the first element satisfying ``predicate``, or the first element if ``predicate`` is
        not provided. Returns ``None`` if there is no such element.
        """

        return self.first_or_default(predicate)

    def last(self, predicate: Predicate[_T] | None = None) -> _T | None:
        """
        Returns the last element satisfying ``predicate``, or the last element if ``predicate`` is
        not provided. Returns ``None`` if there is no such element.
        """

        return self.last_or_default(predicate)

    @overload
    def first_or_default(self, predicate: Predicate[_T] | None = None) -> _T | None: ...

    @overload
    def first_or_default(self, predicate: Predicate[_T] | None, default: _D) -> _T | _D: ...

    def first_or_default(self, predicate: Predicate[_T] | None = None, default: Any = None) -> Any:
        """
        Same as :meth:`first`, but returns ``default`` instead of ``None`` when there is no such
        element. A matching element that is itself ``None`` is returned as is.
        """

        return _search(self._items, predicate, default)

    @overload
    def last_or_default(self, predicate: Predicate[_T] | None = None) -> _T | None: ...

    @overload
    def last_or_default(self, predicate: Predicate[_T] | None, default: _D) -> _T | _D: ...

    def last_or_default(self, predicate: Predicate[_T] | None = None, default: Any = None) -> Any:
        """
        Same as :meth:`last`, but returns ``default`` instead of ``None`` when there is no such
        element.
        """

        return _search(reversed(self._items), predicate, default)

    # Access

    def get(self, index: int) -> _T:
        check_element_index(index, len(self._items))
        return self._items[index]

    def set(self, index: int, value: _T) -> OrderedCollection[_T]:
        """Replaces the element at ``index``, in ``[0, count - 1]``, by ``value``."""

        check_element_index(index, len(self._items))
        self._items[index] = value
        return self

    def __getitem__(self, index: int) -> _T:
        return self.get(index)

    def __setitem__(self, index: int, value: _T) -> None:
        self.set(index, value)

    # Transformations

    def where(self, predicate: Predicate[_T]) -> OrderedCollection[_T]:
        """Returns a new collection of the elements satisfying ``predicate``, with the same comparer."""

        return OrderedCollection(
            [element for element in self._items if predicate(element)], self._comparer
        )

    def select(
        self, selector: Selector[_T, _U], comparer: Comparer[_U] | None = None
    ) -> OrderedCollection[_U]:
        """
        Returns a new collection made of ``selector`` applied to each element, in order.

        :param selector: The function mapping each element to its new value.
        :param comparer: The equality comparer of the new collection. Since the type of the elements
            may change, the comparer of this collection is not reused. Defaults to ``==``.
        """

        return OrderedCollection([selector(element) for element in self._items], comparer)

    def distinct(self) -> OrderedCollection[_T]:
        """
        Returns a new collection keeping only the first occurrence of each element, in order.

        If all elements are strings, real numbers or booleans, duplicates are detected by hashing
        their values, ignoring the comparer. Otherwise, each element is checked with the comparer
        against the elements kept so far, which is quadratic in the number of elements.
        """

        if all_primitive(self._items):
            result = _distinct_by_hash(self._items)
        else:
            result = _distinct_by_comparer(self._items, self._comparer)

        return OrderedCollection(result, self._comparer)

    def sort(self, comparer: OrderComparer[_T] | None = None) -> OrderedCollection[_T]:
        """
        Sorts the elements in place. The sort is stable.

        :param comparer: The ordering function. If not provided, the elements must either all be
            real numbers, sorted in ascending order, or all be strings, sorted according to the
            current ``LC_COLLATE`` locale. Otherwise, an
            :class:`~orderedcollection.UnsupportedOperationError` is raised.
        """

        if comparer is not None:
            sorted_items = sorted(self._items, key=cmp_to_key(comparer))
        elif all_numeric(self._items):
            sorted_items = sorted(self._items)
        elif all_textual(self._items):
            sorted_items = sorted(self._items, key=_collation_key)  # type: ignore[arg-type]
        else:
            type_names = sorted({type(element).__name__ for element in self._items})
            raise UnsupportedOperationError(
                "Cannot sort elements without a `comparer` unless they are all real numbers or all "
                f"strings. Found elements of types {type_names}."
            )

        self._items[:] = sorted_items
        return self

    def for_each(self, action: Action[_T]) -> None:
        """Calls ``action(element, index)`` for each element, in order."""

        for i, element in enumerate(self._items):
            action(element, i)

    def to_list(self) -> list[_T]:
        """Returns a new list of the elements. The elements themselves are not copied."""

        return list(self._items)

    def clone(self) -> OrderedCollection[_T]:
        """Returns a shallow copy of the collection, sharing its comparer."""

        return OrderedCollection(self._items, self._comparer)

    def __add__(self, other: Iterable[_T]) -> OrderedCollection[_T]:
        """
        Creates a new OrderedCollection with the elements of self followed by the elements of other,
        with the comparer of self.
        """

        if not isinstance(other, Iterable):
            return NotImplemented
        return OrderedCollection([*self._items, *other], self._comparer)

    # Python protocols

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedCollection):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(self._comparer(a, b) for a, b in zip(self._items, other._items))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"

    def __str__(self) -> str:
        return items_to_str(self._items)


def _search(items: Iterable[_T], predicate: Predicate[_T] | None, default: Any) -> Any:
    if predicate is None:
        return next(iter(items), default)
    return next((item for item in items if predicate(item)), default)


def _collation_key(text: str) -> list[str]:
    # strxfrm rejects embedded null characters, so each null-separated segment is collated on its
    # own.
    return [locale.strxfrm(part) for part in text.split("\0")]


def _distinct_by_hash(items: Iterable[_T]) -> list[_T]:
    # Booleans are keyed apart from the numbers they are equal to (True == 1), and all NaNs share
    # one key since they are never equal to each other.
    seen: set[object] = set()
    result = []
    for item in items:
        key = _NAN_KEY if item != item else (isinstance(item, bool), item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def _distinct_by_comparer(items: Iterable[_T], comparer: Comparer[_T]) -> list[_T]:
    result: list[_T] = []
    for item in items:
        if not any(comparer(kept, item) for kept in result):
            result.append(item)
    return result
