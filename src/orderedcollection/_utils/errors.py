class IndexOutOfRangeError(IndexError):
    """An index argument is outside of the range accepted by the operation."""

    def __init__(self, index: int, lower: int, upper: int):
        super().__init__(
            f"Parameter `index` should be in the range [{lower}, {upper}]. Found `index = {index}`."
        )
        self.index = index
        self.lower = lower
        self.upper = upper


class UnsupportedOperationError(TypeError):
    """The operation cannot be performed on the current elements without extra information."""

    pass
