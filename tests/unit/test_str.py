from pytest import mark

from orderedcollection._utils.str import items_to_str


@mark.parametrize(
    ["items", "expected"],
    [
        ([], "[]"),
        ([1], "[1]"),
        (["a", None, 2.5], "[a, None, 2.5]"),
        (list(range(10)), "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"),
        (list(range(11)), "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9, ...]"),
    ],
)
def test_items_to_str(items: list, expected: str):
    assert items_to_str(items) == expected
