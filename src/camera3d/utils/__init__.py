"""Common utilities for camera math."""

from .conversion import (
    to_torch_tensor,
    to_numpy_array,
    to_column_major,
)
from .validation import (
    DEFAULT_DTYPE,
    ensure_vector3,
    ensure_4x4_matrix,
    ensure_quaternion,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
)

__all__ = [
    # Conversion
    "to_torch_tensor",
    "to_numpy_array",
    "to_column_major",
    
    # Validation
    "DEFAULT_DTYPE",
    "ensure_vector3",
    "ensure_4x4_matrix",
    "ensure_quaternion",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
]
