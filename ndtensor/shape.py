"""
Tensor geometry.

A :class:`Shape` is the immutable sequence of extents of a tensor. It owns the
row-major (C order) mapping from a multi-index coordinate to the linear offset
of that element in storage: the last axis is contiguous and the stride of axis
``i`` is the product of all extents to its right.
"""

import itertools
import operator
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from .errors import IndexOutOfBoundsError, RankMismatchError, ShapeMismatchError
from .logger import get_logger

logger = get_logger()

Coordinate = Union[int, Tuple[int, ...]]


def _as_extent(value) -> int:
    try:
        extent = operator.index(value)
    except TypeError:
        raise TypeError(
            f"Shape extents must be integers, got {type(value).__name__}"
        ) from None
    if extent < 0:
        raise ValueError(f"Shape extents must be non-negative, got {extent}")
    return extent


class Shape:
    __slots__ = ("_extents", "_strides")

    def __init__(self, extents: Iterable[int]):
        if isinstance(extents, Shape):
            extents = extents.extents
        extents = tuple(_as_extent(e) for e in extents)
        strides = [1] * len(extents)
        for axis in range(len(extents) - 2, -1, -1):
            strides[axis] = strides[axis + 1] * extents[axis + 1]
        object.__setattr__(self, "_extents", extents)
        object.__setattr__(self, "_strides", tuple(strides))

    def __setattr__(self, name, value):
        raise AttributeError("Shape is immutable")

    def __delattr__(self, name):
        raise AttributeError("Shape is immutable")

    def __reduce__(self):
        return (Shape, (self._extents,))

    def __copy__(self) -> "Shape":
        return self

    def __deepcopy__(self, memo) -> "Shape":
        return self

    # --- Geometry ---

    @property
    def extents(self) -> Tuple[int, ...]:
        return self._extents

    @property
    def rank(self) -> int:
        return len(self._extents)

    def size(self) -> int:
        """Number of elements; 1 for rank 0, 0 if any extent is 0."""
        size = 1
        for extent in self._extents:
            size *= extent
        return size

    def strides(self) -> Tuple[int, ...]:
        return self._strides

    def index(self, coordinate: Coordinate) -> int:
        """
        Map a coordinate to its row-major storage offset.

        Args:
            coordinate: one integer per axis. A bare integer is accepted for
                rank-1 shapes.

        Returns:
            The linear offset ``sum(coordinate[i] * strides()[i])``.

        Raises:
            IndexOutOfBoundsError: if the coordinate has the wrong length or any
                component is outside ``[0, extent)``.
        """
        if not isinstance(coordinate, (tuple, list)):
            if self.rank != 1:
                raise IndexOutOfBoundsError(
                    f"A bare integer index is only valid for rank-1 tensors, "
                    f"this tensor has rank {self.rank}"
                )
            coordinate = (coordinate,)
        if len(coordinate) != self.rank:
            raise IndexOutOfBoundsError(
                f"Coordinate {tuple(coordinate)} has {len(coordinate)} components, "
                f"expected {self.rank} for shape {self._extents}"
            )
        offset = 0
        for axis, (component, extent, stride) in enumerate(
            zip(coordinate, self._extents, self._strides)
        ):
            try:
                if isinstance(component, (bool, np.bool_)):
                    raise TypeError
                component = operator.index(component)
            except TypeError:
                raise IndexOutOfBoundsError(
                    f"Coordinate components must be integers, "
                    f"got {type(component).__name__} on axis {axis}"
                ) from None
            if not 0 <= component < extent:
                raise IndexOutOfBoundsError(
                    f"Index {component} is out of bounds for axis {axis} with extent {extent}"
                )
            offset += component * stride
        return offset

    def coordinates(self) -> Iterator[Tuple[int, ...]]:
        """Yield every valid coordinate in ascending offset order."""
        return itertools.product(*(range(extent) for extent in self._extents))

    # --- Compatibility ---

    def is_compatible(self, other: "Shape") -> bool:
        return self._extents == Shape(other).extents

    def check_compatible(self, other: "Shape") -> None:
        """Raise unless ``other`` has the same rank and the same extent on every axis."""
        other = Shape(other)
        if self.rank != other.rank:
            logger.debug("rank mismatch: %s vs %s", self._extents, other.extents)
            raise RankMismatchError(self._extents, other.extents)
        for axis, (dim1, dim2) in enumerate(zip(self._extents, other.extents)):
            if dim1 != dim2:
                logger.debug("extent mismatch on axis %d: %s vs %s", axis, self._extents, other.extents)
                raise ShapeMismatchError(self._extents, other.extents, axis=axis)

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return len(self._extents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._extents)

    def __getitem__(self, axis: int) -> int:
        return self._extents[axis]

    def __eq__(self, other) -> bool:
        if isinstance(other, Shape):
            return self._extents == other._extents
        if isinstance(other, tuple):
            return self._extents == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._extents)

    def __repr__(self) -> str:
        return f"Shape({list(self._extents)})"


__all__ = [
    "Shape",
    "Coordinate",
]
