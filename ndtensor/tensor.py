"""
Defines the Tensor object for ndtensor.

A Tensor is a fixed-rank, dense, homogeneously-typed array. It pairs an
immutable :class:`~ndtensor.shape.Shape` with an exclusively owned
:class:`~ndtensor.storage.Storage` of exactly ``shape.size()`` elements, laid
out in row-major order.

Supported operations:
    - construction (zero-filled) from a shape and an element type
    - element read/write by coordinate (a bare integer for rank-1 tensors)
    - deep copy via :meth:`Tensor.clone`, ``copy.copy`` or ``copy.deepcopy``
    - elementwise addition with a tensor of the same shape or with a scalar,
      in place (``+=``, :meth:`Tensor.add_`) or producing a new tensor
      (``+``, :meth:`Tensor.add`)
"""

import numbers
from typing import Iterable, Optional, Union

import numpy as np

from .config import default_dtype
from .dtype import dtype_info
from .errors import DTypeMismatchError
from .logger import get_logger
from .shape import Coordinate, Shape
from .storage import Storage

logger = get_logger()

ShapeLike = Union[Shape, Iterable[int]]


def _is_scalar(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real) and not isinstance(value, Tensor)


class Tensor:
    """
    Dense row-major tensor.

    Args:
        shape (Shape or sequence of int): extent of every axis. Fixed for the
            lifetime of the tensor.
        dtype (str, optional): element type name, one of the registered dtypes.
            Defaults to :func:`ndtensor.config.default_dtype`.
    """

    __slots__ = ("_shape", "_storage")

    # Keep numpy from treating a Tensor as an array operand, so that
    # `np.float64(1.0) + t` falls through to Tensor.__radd__.
    __array_ufunc__ = None

    def __init__(self, shape: ShapeLike, dtype: Optional[str] = None):
        shape = Shape(shape)
        if dtype is None:
            dtype = default_dtype()
        self._shape = shape
        self._storage = Storage.zeros(shape.size(), dtype)
        logger.debug("allocated tensor shape=%s dtype=%s", shape.extents, dtype)

    @classmethod
    def new(cls, shape: ShapeLike, dtype: Optional[str] = None) -> "Tensor":
        return cls(shape, dtype)

    @classmethod
    def _from_parts(cls, shape: Shape, storage: Storage) -> "Tensor":
        assert len(storage) == shape.size()
        tensor = cls.__new__(cls)
        tensor._shape = shape
        tensor._storage = storage
        return tensor

    # --- Properties ---

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def dtype(self) -> str:
        return self._storage.dtype

    @property
    def rank(self) -> int:
        return self._shape.rank

    def size(self) -> int:
        return self._shape.size()

    # --- Element access ---

    def __getitem__(self, coordinate: Coordinate):
        return self._storage[self._shape.index(coordinate)]

    def __setitem__(self, coordinate: Coordinate, value) -> None:
        if not _is_scalar(value):
            raise TypeError(
                f"Tensor elements must be real scalars, got {type(value).__name__}"
            )
        offset = self._shape.index(coordinate)
        self._storage[offset] = dtype_info(self.dtype).cast(value)

    # --- Copying ---

    def clone(self) -> "Tensor":
        """Return an independent tensor with an equal shape and a copy of the data."""
        logger.debug("cloning tensor shape=%s dtype=%s", self._shape.extents, self.dtype)
        return Tensor._from_parts(Shape(self._shape), self._storage.copy())

    def __copy__(self) -> "Tensor":
        return self.clone()

    def __deepcopy__(self, memo) -> "Tensor":
        return self.clone()

    # --- Arithmetic ---

    def add_(self, other) -> "Tensor":
        """
        Add ``other`` to this tensor in place and return ``self``.

        ``other`` is either a tensor of the same shape and dtype, or a real
        scalar added to every element. Shapes are checked before anything is
        written, so a failed call leaves both operands untouched. ``other`` is
        never modified.

        Raises:
            RankMismatchError: if ``other`` has a different rank.
            ShapeMismatchError: if any axis extent differs.
            DTypeMismatchError: if the element types differ.
            TypeError: if ``other`` is neither a tensor nor a real scalar.
        """
        if isinstance(other, Tensor):
            self._shape.check_compatible(other._shape)
            if self.dtype != other.dtype:
                logger.debug("dtype mismatch: %s vs %s", self.dtype, other.dtype)
                raise DTypeMismatchError(
                    f"Tensors must have the same dtype to add them, got {self.dtype} and {other.dtype}"
                )
            self._storage.add_(other._storage)
        elif _is_scalar(other):
            self._storage.add_scalar_(other)
        else:
            raise TypeError(
                f"Cannot add {type(other).__name__} to a Tensor; expected a Tensor or a real scalar"
            )
        return self

    def add(self, other) -> "Tensor":
        """Return ``self + other`` as a new tensor; neither operand is modified."""
        return self.clone().add_(other)

    def __iadd__(self, other):
        if not isinstance(other, Tensor) and not _is_scalar(other):
            return NotImplemented
        return self.add_(other)

    def __add__(self, other):
        if not isinstance(other, Tensor) and not _is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # Only reached for `scalar + tensor`
        if not _is_scalar(other):
            return NotImplemented
        return self.add(other)

    # --- Conversion ---

    def tolist(self):
        """Return the elements as nested Python lists, outermost axis first."""
        return self._storage.view().reshape(self._shape.extents).tolist()

    def numpy(self) -> np.ndarray:
        """Return an independent numpy array with this tensor's shape and data."""
        return self._storage.view().reshape(self._shape.extents).copy()

    def __repr__(self) -> str:
        return f"Tensor({self.tolist()}, shape={list(self._shape.extents)}, dtype={self.dtype})"


def zeros(*extents, dtype: Optional[str] = None) -> Tensor:
    """
    Create a zero-filled tensor.

    Accepts the extents either as separate arguments (``zeros(2, 3)``) or as a
    single sequence (``zeros((2, 3))``).
    """
    if len(extents) == 1 and not isinstance(extents[0], numbers.Integral):
        extents = extents[0]
    return Tensor(extents, dtype)


__all__ = [
    "Tensor",
    "zeros",
]
