"""
Exception types raised by ndtensor.

Every error derives from :class:`TensorError` and from the builtin exception
callers would naturally expect (``ValueError`` for shape problems,
``IndexError`` for bad coordinates, ...), so ``except IndexError`` keeps working.
"""

from typing import Optional, Tuple


class TensorError(Exception):
    """Base class for all ndtensor errors."""


class ShapeMismatchError(TensorError, ValueError):
    """Two tensors with different extents were combined."""

    MESSAGE = "All dimensions of two tensors must be of the same size to add them."

    def __init__(
        self,
        left: Tuple[int, ...],
        right: Tuple[int, ...],
        axis: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.left = tuple(left)
        self.right = tuple(right)
        self.axis = axis
        self._message = message or self.MESSAGE
        super().__init__(str(self))

    def __str__(self) -> str:
        line = f"expected {self.left}, got {self.right}"
        if self.axis is not None:
            line += f" (first mismatch on axis {self.axis})"
        return f"{self._message}\n{line}."


class RankMismatchError(ShapeMismatchError):
    """Two tensors of different rank were combined."""

    MESSAGE = "Tensors must be of the same dimension to add them."


class IndexOutOfBoundsError(TensorError, IndexError):
    """A coordinate or storage offset lies outside the valid range."""


class DTypeMismatchError(TensorError, TypeError):
    """Two tensors of different element types were combined."""


class UnsupportedDTypeError(TensorError, KeyError):
    """The requested element type is not registered."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


__all__ = [
    "TensorError",
    "ShapeMismatchError",
    "RankMismatchError",
    "IndexOutOfBoundsError",
    "DTypeMismatchError",
    "UnsupportedDTypeError",
]
