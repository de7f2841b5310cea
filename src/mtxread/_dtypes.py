"""
Data Type Definitions

Provides the coordinate and value numeric types a matrix can be read into,
plus validation helpers.
"""

from typing import Union
from enum import Enum

import numpy as np

__all__ = [
    'DType', 'float32', 'float64', 'int32', 'int64', 'uint32', 'uint64',
    'COORD_DTYPES', 'VALUE_DTYPES',
]


class DType(Enum):
    """
    Numeric type enumeration.

    Example:
        >>> import mtxread
        >>> csr = mtxread.read_csr("a.mtx", coord_dtype=mtxread.int32,
        ...                        value_dtype=mtxread.float32)
    """

    float32 = 'float32'
    float64 = 'float64'
    int32 = 'int32'
    int64 = 'int64'
    uint32 = 'uint32'
    uint64 = 'uint64'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"DType.{self.name}"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.value)


# =============================================================================
# Module-Level Constants
# =============================================================================

float32 = DType.float32
float64 = DType.float64
int32 = DType.int32
int64 = DType.int64
uint32 = DType.uint32
uint64 = DType.uint64

COORD_DTYPES = frozenset({'int32', 'int64', 'uint32', 'uint64'})
VALUE_DTYPES = frozenset({'float32', 'float64', 'int32', 'int64'})


# =============================================================================
# Type Utilities
# =============================================================================

def normalize_dtype(dtype: Union[str, DType, np.dtype, type]) -> str:
    """
    Normalize dtype to string.

    Accepts DType members, strings and numpy dtypes / scalar types.

    Example:
        >>> normalize_dtype(DType.float32)
        'float32'
        >>> normalize_dtype(np.int64)
        'int64'
    """
    if isinstance(dtype, DType):
        return dtype.value
    elif isinstance(dtype, str):
        return dtype
    elif isinstance(dtype, np.dtype):
        return dtype.name
    elif isinstance(dtype, type) and issubclass(dtype, np.generic):
        return np.dtype(dtype).name
    else:
        raise TypeError(f"dtype must be str, DType or numpy dtype, got {type(dtype)}")


def validate_dtype(dtype: str) -> None:
    """
    Validate dtype string.

    Raises:
        ValueError: If dtype is not supported
    """
    valid = {e.value for e in DType}
    if dtype not in valid:
        raise ValueError(f"Invalid dtype: {dtype}. Valid: {sorted(valid)}")


def coord_dtype(dtype: Union[str, DType, np.dtype, type]) -> np.dtype:
    """Resolve a coordinate dtype, rejecting non-integer types."""
    name = normalize_dtype(dtype)
    validate_dtype(name)
    if name not in COORD_DTYPES:
        raise ValueError(f"Invalid coordinate dtype: {name}. Valid: {sorted(COORD_DTYPES)}")
    return np.dtype(name)


def value_dtype(dtype: Union[str, DType, np.dtype, type]) -> np.dtype:
    """Resolve a value dtype."""
    name = normalize_dtype(dtype)
    validate_dtype(name)
    if name not in VALUE_DTYPES:
        raise ValueError(f"Invalid value dtype: {name}. Valid: {sorted(VALUE_DTYPES)}")
    return np.dtype(name)


def is_float_dtype(dtype: Union[str, DType, np.dtype]) -> bool:
    """Check if dtype is floating point."""
    return normalize_dtype(dtype) in ('float32', 'float64')


def int_bounds(dtype: Union[str, DType, np.dtype]) -> tuple:
    """Inclusive (min, max) representable by an integer dtype."""
    info = np.iinfo(np.dtype(normalize_dtype(dtype)))
    return int(info.min), int(info.max)
