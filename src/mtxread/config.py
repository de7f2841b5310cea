"""
Global configuration for mtxread.

Provides:
- Default precision settings (coordinate type, value type)
- Environment overrides read once at import time

Per-call dtype arguments to the read functions always take precedence
over these defaults.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple, Union

import numpy as np

from ._dtypes import DType, coord_dtype, value_dtype

logger = logging.getLogger("mtxread.config")

DtypeLike = Union[DType, str, np.dtype, type]

ENV_COORD_DTYPE = "MTXREAD_COORD_DTYPE"
ENV_VALUE_DTYPE = "MTXREAD_VALUE_DTYPE"


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.

    Holds the default coordinate and value dtypes.
    """

    def __init__(self):
        # Default: int64 + float64 (most compatible)
        self._default_coord = np.dtype('int64')
        self._default_value = np.dtype('float64')

    @property
    def default_coord(self) -> np.dtype:
        """Get default coordinate dtype."""
        return self._default_coord

    @default_coord.setter
    def default_coord(self, value: DtypeLike):
        self._default_coord = coord_dtype(value)

    @property
    def default_value(self) -> np.dtype:
        """Get default value dtype."""
        return self._default_value

    @default_value.setter
    def default_value(self, value: DtypeLike):
        self._default_value = value_dtype(value)

    def resolve(
        self,
        coord: Optional[DtypeLike] = None,
        value: Optional[DtypeLike] = None,
    ) -> Tuple[np.dtype, np.dtype]:
        """Resolve per-call dtypes against the defaults."""
        c = self._default_coord if coord is None else coord_dtype(coord)
        v = self._default_value if value is None else value_dtype(value)
        return c, v

    def load_env(self, environ=None) -> None:
        """Apply MTXREAD_COORD_DTYPE / MTXREAD_VALUE_DTYPE overrides."""
        environ = os.environ if environ is None else environ
        coord = environ.get(ENV_COORD_DTYPE, '').strip()
        value = environ.get(ENV_VALUE_DTYPE, '').strip()
        if coord:
            self.default_coord = coord
            logger.debug(f"Default coordinate dtype from environment: {coord}")
        if value:
            self.default_value = value
            logger.debug(f"Default value dtype from environment: {value}")


def _load_env_defaults(config: _Config, environ=None) -> None:
    """Apply environment overrides at import; bad values keep the defaults."""
    try:
        config.load_env(environ)
    except ValueError as e:
        logger.warning(f"Ignoring invalid dtype in environment: {e}")
        config.default_coord = 'int64'
        config.default_value = 'float64'


# Global config instance
_config = _Config()
_load_env_defaults(_config)


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_precision(
    coord: Optional[DtypeLike] = None,
    value: Optional[DtypeLike] = None,
) -> None:
    """
    Set default precision for read operations.

    Args:
        coord: Coordinate type ('int32', 'int64', 'uint32', 'uint64')
        value: Value type ('float32', 'float64', 'int32', 'int64')

    Example:
        >>> mtxread.set_precision(coord='int32', value='float32')
        >>> csr = mtxread.read_csr("a.mtx")  # int32 offsets, float32 values
    """
    if coord is not None:
        _config.default_coord = coord
    if value is not None:
        _config.default_value = value


def get_precision() -> Tuple[np.dtype, np.dtype]:
    """
    Get current default precision.

    Returns:
        Tuple of (coord_dtype, value_dtype)
    """
    return (_config.default_coord, _config.default_value)
