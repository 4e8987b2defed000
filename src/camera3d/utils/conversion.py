"""Type conversion utilities."""

from __future__ import annotations
from typing import Optional, Union
import numpy as np


def to_torch_tensor(
    x: Union[np.ndarray, "torch.Tensor", list],
    device: str = "cpu",
    dtype: "torch.dtype" = None,
):
    """
    Convert a matrix or vector to a PyTorch tensor for a GPU rasterizer.
    
    Args:
        x: Input (numpy array, torch tensor, or list)
        device: Target device
        dtype: Target dtype (default: torch.float32)
    
    Returns:
        Contiguous PyTorch tensor on the given device
    """
    import torch
    
    if dtype is None:
        dtype = torch.float32
    
    if isinstance(x, torch.Tensor):
        tensor = x.to(dtype)
    else:
        tensor = torch.as_tensor(np.ascontiguousarray(x), dtype=dtype)
    
    if device and tensor.device != torch.device(device):
        tensor = tensor.to(device)
    
    return tensor.contiguous()


def to_numpy_array(
    x: Union[np.ndarray, "torch.Tensor", list],
    dtype: Optional[np.dtype] = np.float32
) -> np.ndarray:
    """
    Convert camera inputs (vectors, quaternions, matrices) to NumPy.
    
    Args:
        x: Input (numpy array, torch tensor on any device, or nested list)
        dtype: Target dtype; None keeps the dtype of the input
    
    Returns:
        NumPy array (no copy when ``x`` already is an array of that dtype)
    """
    if hasattr(x, 'detach'):  # torch.Tensor
        arr = x.detach().cpu().numpy()
    else:
        arr = np.asarray(x)
    
    if dtype is None:
        return arr
    return arr.astype(dtype, copy=False)


def to_column_major(m: np.ndarray) -> np.ndarray:
    """
    Transpose a row-major matrix for a column-major rasterizer API.
    
    Args:
        m: (4, 4) row-major matrix
    
    Returns:
        Contiguous transposed copy, same dtype
    """
    return np.ascontiguousarray(to_numpy_array(m, dtype=None).T)
