"""Errors raised by the array types.

Both subclass IndexError, so callers that already catch IndexError keep working.
"""


class IndexOutOfRangeError(IndexError):
    """An index fell outside the valid range of an operation.

    Attributes:
        index: The index the caller supplied
        low: Smallest valid index (always 0)
        high: Largest valid index, or -1 when no index is valid
    """

    def __init__(self, op: str, index: int, high: int):
        self.op = op
        self.index = index
        self.low = 0
        self.high = high
        if high < 0:
            message = f"{op}: index {index} out of range (array is empty)"
        else:
            message = f"{op}: index {index} out of range [0, {high}]"
        super().__init__(message)

    @property
    def is_empty(self) -> bool:
        return self.high < 0


class EmptyCollectionError(IndexError):
    def __init__(self, op: str):
        self.op = op
        super().__init__(f"{op}: array is empty")
