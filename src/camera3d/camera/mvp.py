"""Model-view-projection composition."""

from __future__ import annotations
import numpy as np

from ..utils.validation import DEFAULT_DTYPE, ensure_4x4_matrix
from ..utils.conversion import to_numpy_array


def model_view_projection(model, view, projection) -> np.ndarray:
    """
    Compute a model view projection matrix.
    
    Returns ``model @ (projection @ view)``. The grouping documents the
    intended order (view, then projection, then model) and has no effect
    on the result.
    
    Args:
        model: (4, 4) model matrix (flat length-16 arrays and torch tensors
            are accepted for all three inputs)
        view: (4, 4) view matrix, e.g. ``Camera.orthogonal()``
        projection: (4, 4) projection matrix, e.g. ``CameraPerspective.projection()``
    
    Returns:
        (4, 4) composed matrix in the widest floating dtype of the inputs
    
    Raises:
        ValueError: If an input cannot be reshaped to 4x4
    """
    model, view, projection = (
        to_numpy_array(m, dtype=None) for m in (model, view, projection)
    )
    dtype = np.result_type(model, view, projection, DEFAULT_DTYPE)
    M = ensure_4x4_matrix(model, dtype)
    V = ensure_4x4_matrix(view, dtype)
    P = ensure_4x4_matrix(projection, dtype)
    
    return M @ (P @ V)
