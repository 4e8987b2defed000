"""Debug utilities."""

from __future__ import annotations
import os

import numpy as np

DEBUG_ENV_VAR = "CAMERA3D_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def debug_matrix_info(name: str, matrix):
    """Print shape, dtype and contents of a matrix."""
    if is_debug_enabled():
        m = np.asarray(matrix)
        rows = np.array2string(m, precision=4, suppress_small=True)
        print(f"[{name}] shape={m.shape} dtype={m.dtype}\n{rows}")
