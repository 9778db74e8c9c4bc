from dataclasses import dataclass
from typing import Dict

import numpy as np

from .errors import UnsupportedDTypeError


@dataclass(frozen=True)
class DataTypeInfo:
    name: str
    numpy_type: type
    size_in_bytes: int

    def zero(self):
        return self.numpy_type(0)

    def cast(self, value):
        return self.numpy_type(value)


DATA_TYPES: Dict[str, DataTypeInfo] = {}


def register_dtype(name: str, numpy_type: type, size_in_bytes: int):
    if name in DATA_TYPES:
        raise ValueError(f"dtype {name!r} registered twice")
    if not np.issubdtype(numpy_type, np.floating):
        raise ValueError(f"element types must be floating point, got {numpy_type!r}")
    DATA_TYPES[name] = DataTypeInfo(
        name, numpy_type, size_in_bytes
    )


def dtype_info(name: str) -> DataTypeInfo:
    try:
        return DATA_TYPES[name]
    except KeyError:
        raise UnsupportedDTypeError(
            f"Unsupported dtype {name!r}; expected one of {sorted(DATA_TYPES)}"
        ) from None


def zero(name: str):
    return dtype_info(name).zero()


register_dtype("float64", np.float64, 8)
register_dtype("float32", np.float32, 4)
register_dtype("float16", np.float16, 2)
