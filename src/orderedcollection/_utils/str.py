from collections.abc import Sequence

_MAX_SHOWN_ITEMS = 10


def items_to_str(items: Sequence[object]) -> str:
    """
    Transforms a sequence of items into a string of the form `[1, 2, 3]`. Only the first items are
    shown when there are many of them, e.g. `[0, 1, ..., 9, ...]`.
    """

    shown = ", ".join([str(item) for item in items[:_MAX_SHOWN_ITEMS]])
    if len(items) > _MAX_SHOWN_ITEMS:
        shown += ", ..."
    return f"[{shown}]"
