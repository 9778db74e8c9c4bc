"""
ndtensor - a fixed-rank, dense tensor container.

This package provides a row-major Tensor object backed by an owned numpy
buffer, with element access by multi-index and elementwise addition.
"""

# --- Core Components ---
from .shape import Shape
from .storage import Storage
from .tensor import Tensor, zeros

# --- Element Types ---
from .dtype import DATA_TYPES, DataTypeInfo, dtype_info, register_dtype

# --- Errors ---
from .errors import (
    DTypeMismatchError,
    IndexOutOfBoundsError,
    RankMismatchError,
    ShapeMismatchError,
    TensorError,
    UnsupportedDTypeError,
)

# --- Version Information ---
# Try to get version from package metadata if installed
try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("ndtensor")
except PackageNotFoundError:
    # Not installed; should match version in setup.py
    __version__ = "0.1.0"

# --- Define what `from ndtensor import *` imports ---
__all__ = [
    # Core
    "Tensor",
    "Shape",
    "Storage",
    "__version__",
    # Creation Ops
    "zeros",
    # Element types
    "DATA_TYPES",
    "DataTypeInfo",
    "dtype_info",
    "register_dtype",
    # Errors
    "TensorError",
    "ShapeMismatchError",
    "RankMismatchError",
    "IndexOutOfBoundsError",
    "DTypeMismatchError",
    "UnsupportedDTypeError",
]
