"""Input validation utilities."""

from __future__ import annotations
import numpy as np

from .conversion import to_numpy_array


DEFAULT_DTYPE = np.float32


def ensure_vector3(v, dtype=DEFAULT_DTYPE) -> np.ndarray:
    """
    Convert input to a 3-component vector.
    
    Args:
        v: Input vector (array, torch tensor, list or tuple of 3 values)
        dtype: Floating-point scalar type
    
    Returns:
        (3,) numpy array of the given dtype, never sharing memory with ``v``
    
    Raises:
        ValueError: If input does not hold exactly 3 values
    """
    vec = np.array(to_numpy_array(v, dtype), copy=True)
    
    if vec.shape != (3,):
        raise ValueError(f"Expected 3-component vector, got shape {vec.shape}")
    
    return vec


def ensure_4x4_matrix(m, dtype=DEFAULT_DTYPE) -> np.ndarray:
    """
    Convert a camera, projection or model matrix to a 4x4 array.
    
    Torch tensors are moved to host memory first.
    
    Args:
        m: 4x4 matrix or flat length-16 sequence in row-major order
        dtype: Floating-point scalar type
    
    Returns:
        (4, 4) numpy array of the given dtype
    
    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = to_numpy_array(m, dtype)
    
    if M.shape == (16,):
        M = M.reshape(4, 4)
    elif M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )
    
    return M


def ensure_quaternion(q, dtype=np.float64) -> np.ndarray:
    """
    Convert input to an XYZW quaternion.
    
    Only the shape is checked. Zero, non-unit and non-finite quaternions
    pass through unchanged.
    
    Args:
        q: Input quaternion [x, y, z, w] (scalar-last)
        dtype: Floating-point scalar type
    
    Returns:
        (4,) numpy array of the given dtype
    
    Raises:
        ValueError: If input does not hold exactly 4 values
    """
    quat = to_numpy_array(q, dtype)
    
    if quat.shape != (4,):
        raise ValueError(f"Expected XYZW quaternion of shape (4,), got {quat.shape}")
    
    return quat
