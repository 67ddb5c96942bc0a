from .errors import IndexOutOfRangeError


def check_is_index(index: object) -> None:
    # bool is a subclass of int, but `c[True]` is almost certainly a mistake.
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(
            f"Parameter `index` should be an `int`. Found `index` of type {type(index).__name__}."
        )


def check_element_index(index: int, count: int) -> None:
    """
    Checks that ``index`` designates an existing element of a collection of ``count`` elements,
    i.e. that it lies in ``[0, count - 1]``.
    """

    check_is_index(index)
    if not 0 <= index < count:
        raise IndexOutOfRangeError(index, 0, count - 1)


def check_insertion_index(index: int, count: int) -> None:
    """
    Checks that ``index`` is a valid insertion position in a collection of ``count`` elements,
    i.e. that it lies in ``[0, count]``.
    """

    check_is_index(index)
    if not 0 <= index <= count:
        raise IndexOutOfRangeError(index, 0, count)
