"""
Dynamic array -- a growable, contiguous buffer of fixed-width scalars.

Length (live elements) and capacity (allocated slots) are tracked separately.
When an append or insert finds the buffer full, a new buffer of twice the
capacity is allocated, the live elements are copied over in order, and the old
buffer is dropped. Doubling keeps the total copy work for k appends at
O(c0 + k), so append is amortized O(1). Insert and delete shift the tail one
slot and are O(n).

Capacity never shrinks. clear() only resets the length.
"""

import logging
from typing import Dict, Iterator, List, Union

import numpy as np

from array_errors import EmptyCollectionError, IndexOutOfRangeError

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 2
GROWTH_FACTOR = 2
NOT_FOUND = -1
DEFAULT_DTYPE = np.int64

# bool, signed int, unsigned int, float, complex
_SCALAR_KINDS = "biufc"

Scalar = Union[int, float, complex, bool, np.generic]


def scalar_dtype(dtype) -> np.dtype:
    """Normalize ``dtype`` and reject anything that is not a fixed-width scalar."""
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise ValueError(f"unsupported dtype: {dtype!r}") from exc
    if dt.kind not in _SCALAR_KINDS:
        raise ValueError(f"unsupported dtype: {dt} (expected a numeric or bool dtype)")
    return dt


def coerce_scalar(value, dtype: np.dtype) -> np.generic:
    """Convert a single value to ``dtype``; sequences are rejected, not broadcast."""
    if isinstance(value, (list, tuple, set, dict)):
        raise ValueError(f"expected a scalar, got {type(value).__name__}")
    converted = np.asarray(value, dtype=dtype)
    if converted.ndim != 0:
        raise ValueError(f"expected a scalar, got shape {converted.shape}")
    return converted[()]


class DynamicArray:
    """Resizable array backed by a NumPy buffer.

    Only indices in [0, length) are ever read back. Slots past the length hold
    leftover or uninitialised values and are not part of the contents.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY, dtype=DEFAULT_DTYPE):
        """
        Args:
            capacity: Initial number of slots. Values below INITIAL_CAPACITY
                (including zero and negatives) are rounded up to it.
            dtype: Element type, any numeric or bool NumPy dtype
        """
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise ValueError("capacity must be an integer")
        self._dtype = scalar_dtype(dtype)
        self._capacity = max(int(capacity), INITIAL_CAPACITY)
        self._length = 0
        self._data = np.empty(self._capacity, dtype=self._dtype)

    @classmethod
    def with_capacity(cls, capacity: int, dtype=DEFAULT_DTYPE) -> "DynamicArray":
        return cls(capacity, dtype=dtype)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def element_size(self) -> int:
        return self._dtype.itemsize

    def length(self) -> int:
        return self._length

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._length == 0

    def get(self, index: int) -> Scalar:
        self._check_index("DynamicArray.get", index, self._length - 1)
        return self._data[index].item()

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set(self, index: int, value: Scalar) -> None:
        self._check_index("DynamicArray.set", index, self._length - 1)
        self._data[index] = self._coerce(value)

    def append(self, value: Scalar) -> None:
        value = self._coerce(value)
        if self._length == self._capacity:
            self._grow()
        self._data[self._length] = value
        self._length += 1

    def insert(self, index: int, value: Scalar) -> None:
        """Insert ``value`` before position ``index``; index == length appends."""
        self._check_index("DynamicArray.insert", index, self._length)
        value = self._coerce(value)
        if self._length == self._capacity:
            self._grow()
        # Overlapping slice assignment is buffered by NumPy, so this is a
        # tail-first shift with nothing overwritten before it is copied.
        self._data[index + 1:self._length + 1] = self._data[index:self._length]
        self._data[index] = value
        self._length += 1

    def delete(self, index: int) -> None:
        self._check_index("DynamicArray.delete", index, self._length - 1)
        self._data[index:self._length - 1] = self._data[index + 1:self._length]
        self._length -= 1

    def pop(self) -> Scalar:
        if self._length == 0:
            raise EmptyCollectionError("DynamicArray.pop")
        self._length -= 1
        return self._data[self._length].item()

    def clear(self) -> None:
        self._length = 0

    # ------------------------------------------------------------------
    # Search and export
    # ------------------------------------------------------------------

    def index_of(self, value: Scalar) -> int:
        """Index of the first element equal to ``value``, or NOT_FOUND.

        A sequence never equals a scalar slot, so it is never found.
        """
        if isinstance(value, (list, tuple, set, dict)) or np.ndim(value) != 0:
            return NOT_FOUND
        for i in range(self._length):
            if self._data[i] == value:
                return i
        return NOT_FOUND

    def contains(self, value: Scalar) -> bool:
        return self.index_of(value) != NOT_FOUND

    def to_list(self) -> List[Scalar]:
        return self._data[:self._length].tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data[:self._length].copy()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def memory_info(self) -> Dict[str, object]:
        """
        Memory held by the buffer.

        Returns:
            Dict with element_size, used_bytes, allocated_bytes and utilization
            (percentage of allocated bytes holding live elements).
        """
        element_size = self.element_size
        used = self._length * element_size
        allocated = self._capacity * element_size
        return {
            "element_size": element_size,
            "used_bytes": used,
            "allocated_bytes": allocated,
            "utilization": used / allocated * 100 if allocated else 0.0,
        }

    def info(self) -> Dict[str, object]:
        return {
            "length": self._length,
            "capacity": self._capacity,
            "is_empty": self.is_empty(),
            **self.memory_info(),
        }

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Scalar]:
        for i in range(self._length):
            yield self._data[i].item()

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __getitem__(self, index: int) -> Scalar:
        return self.get(index)

    def __setitem__(self, index: int, value: Scalar) -> None:
        self.set(index, value)

    def __str__(self) -> str:
        return "DynamicArray[" + ", ".join(str(v) for v in self) + "]"

    def __repr__(self) -> str:
        return (
            f"DynamicArray({self.to_list()!r}, length={self._length}, "
            f"capacity={self._capacity}, dtype={self._dtype})"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _grow(self) -> None:
        old_capacity = self._capacity
        new_capacity = old_capacity * GROWTH_FACTOR
        new_data = np.empty(new_capacity, dtype=self._dtype)
        new_data[:self._length] = self._data[:self._length]
        self._data = new_data
        self._capacity = new_capacity
        logger.debug("DynamicArray grew capacity from %d to %d", old_capacity, new_capacity)

    def _coerce(self, value: Scalar) -> np.generic:
        """Convert ``value`` to the buffer dtype before anything is mutated."""
        return coerce_scalar(value, self._dtype)

    @staticmethod
    def _check_index(op: str, index: int, high: int) -> None:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"{op}: index must be an integer, got {type(index).__name__}")
        if index < 0 or index > high:
            raise IndexOutOfRangeError(op, int(index), high)
