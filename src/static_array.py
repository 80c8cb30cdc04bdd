from typing import Iterator, List

import numpy as np

from array_errors import IndexOutOfRangeError
from dynamic_array import DEFAULT_DTYPE, Scalar, coerce_scalar, scalar_dtype


class StaticArray:
    """Fixed-length array of scalars. Slots start at zero and the size never changes."""

    def __init__(self, size: int, dtype=DEFAULT_DTYPE):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
            raise ValueError("size must be a non-negative integer")
        self._size = int(size)
        self._data = np.zeros(self._size, dtype=scalar_dtype(dtype))

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def get(self, index: int) -> Scalar:
        self._check_index("StaticArray.get", index)
        return self._data[index].item()

    def set(self, index: int, value: Scalar) -> None:
        self._check_index("StaticArray.set", index)
        self._data[index] = coerce_scalar(value, self._data.dtype)

    def size(self) -> int:
        return self._size

    def fill(self, value: Scalar) -> None:
        self._data[:] = coerce_scalar(value, self._data.dtype)

    def to_list(self) -> List[Scalar]:
        return self._data.tolist()

    def __getitem__(self, index: int) -> Scalar:
        return self.get(index)

    def __setitem__(self, index: int, value: Scalar) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._data.tolist())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "StaticArray[" + ", ".join(str(v) for v in self) + "]"

    def __repr__(self) -> str:
        return f"StaticArray({self.to_list()!r}, dtype={self.dtype})"

    def _check_index(self, op: str, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"{op}: index must be an integer, got {type(index).__name__}")
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(op, int(index), self._size - 1)
