"""
Linear element storage for ndtensor.

A :class:`Storage` owns one contiguous, one-dimensional numpy buffer. It knows
nothing about shapes; :class:`ndtensor.tensor.Tensor` maps coordinates to
offsets and hands them to the storage.
"""

import operator
from typing import List

import numpy as np

from .dtype import dtype_info
from .errors import DTypeMismatchError, IndexOutOfBoundsError, ShapeMismatchError


class Storage:
    __slots__ = ("_buffer", "_dtype")

    def __init__(self, data, dtype: str):
        """
        Build a storage holding a copy of ``data``.

        Args:
            data (array_like): one-dimensional sequence of real values.
            dtype (str): registered element type name.

        Raises:
            ValueError: if ``data`` is not one-dimensional.
            UnsupportedDTypeError: if ``dtype`` is not registered.
        """
        info = dtype_info(dtype)
        buffer = np.array(data, dtype=info.numpy_type, copy=True, order="C")
        if buffer.ndim != 1:
            raise ValueError(
                f"Storage data must be one-dimensional, got {buffer.ndim} dimensions"
            )
        self._buffer = buffer
        self._dtype = dtype

    @classmethod
    def _adopt(cls, buffer: np.ndarray, dtype: str) -> "Storage":
        # `buffer` must be freshly allocated and owned by nobody else
        storage = cls.__new__(cls)
        storage._buffer = buffer
        storage._dtype = dtype
        return storage

    @staticmethod
    def zeros(size: int, dtype: str) -> "Storage":
        info = dtype_info(dtype)
        return Storage._adopt(np.zeros(size, dtype=info.numpy_type), dtype)

    @property
    def dtype(self) -> str:
        return self._dtype

    def __len__(self) -> int:
        return self._buffer.shape[0]

    def _check_offset(self, offset) -> int:
        offset = operator.index(offset)
        # No negative wrap-around
        if not 0 <= offset < len(self):
            raise IndexOutOfBoundsError(
                f"Offset {offset} is out of bounds for storage of length {len(self)}"
            )
        return offset

    def __getitem__(self, offset: int):
        return self._buffer[self._check_offset(offset)]

    def __setitem__(self, offset: int, value) -> None:
        self._buffer[self._check_offset(offset)] = value

    def copy(self) -> "Storage":
        return Storage._adopt(self._buffer.copy(), self._dtype)

    def add_(self, other: "Storage") -> None:
        if len(self) != len(other):
            raise ShapeMismatchError((len(self),), (len(other),), axis=0)
        if self._dtype != other._dtype:
            raise DTypeMismatchError(
                f"Storages must have the same dtype to add them, got {self._dtype} and {other._dtype}"
            )
        np.add(self._buffer, other._buffer, out=self._buffer)

    def add_scalar_(self, value) -> None:
        np.add(self._buffer, dtype_info(self._dtype).cast(value), out=self._buffer)

    def tolist(self) -> List[float]:
        return self._buffer.tolist()

    def view(self) -> np.ndarray:
        """Read-only view of the buffer, for callers that need numpy interop."""
        view = self._buffer.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return f"Storage(dtype={self._dtype}, len={len(self)})"


__all__ = [
    "Storage",
]
