"""
Capability checks used to pick an algorithm once per call, based on the runtime categories of all
the elements of a collection.
"""

from collections.abc import Iterable
from numbers import Real


def is_numeric(value: object) -> bool:
    """Whether ``value`` is a real number. Booleans are not considered numeric."""

    return isinstance(value, Real) and not isinstance(value, bool)


def is_textual(value: object) -> bool:
    return isinstance(value, str)


def is_primitive(value: object) -> bool:
    """Whether ``value`` is a string, a real number or a boolean, i.e. hashable by value."""

    return isinstance(value, (str, bool, Real))


def all_numeric(values: Iterable[object]) -> bool:
    return all(is_numeric(value) for value in values)


def all_textual(values: Iterable[object]) -> bool:
    return all(is_textual(value) for value in values)


def all_primitive(values: Iterable[object]) -> bool:
    return all(is_primitive(value) for value in values)
