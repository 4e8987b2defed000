"""
camera3d - Camera math for 3D rendering

Position/orientation camera model, perspective projection and
model-view-projection composition on top of numpy.

Components:
    - Camera: Position and right/up/forward basis, view matrix
    - CameraPerspective: Field of view and clip planes, projection matrix
    - Config: Build cameras and matrices from dicts or YAML files
    - Utils: Validation, conversion and debug helpers

Example:
    >>> from camera3d import Camera, CameraPerspective, model_view_projection
    >>> 
    >>> cam = Camera([0.0, 0.0, 5.0])
    >>> cam.look_at([0.0, 0.0, 0.0])
    >>> persp = CameraPerspective(fov=60.0, near_clip=0.1, far_clip=100.0, aspect_ratio=16 / 9)
    >>> 
    >>> mvp = model_view_projection(model, cam.orthogonal(), persp.projection())
"""

__version__ = "0.1.0"

# Camera
from .camera import (
    Camera,
    CameraPerspective,
    PROJECTION_PI,
    model_view_projection,
    load_camera_config,
    make_camera_from_config,
    make_perspective_from_config,
    make_matrices_from_config,
)

# Utils
from .utils import (
    to_numpy_array,
    to_torch_tensor,
    to_column_major,
    ensure_vector3,
    ensure_4x4_matrix,
    ensure_quaternion,
    is_debug_enabled,
    debug_print,
)

__all__ = [
    "__version__",
    
    # Camera
    "Camera",
    "CameraPerspective",
    "PROJECTION_PI",
    "model_view_projection",
    "load_camera_config",
    "make_camera_from_config",
    "make_perspective_from_config",
    "make_matrices_from_config",
    
    # Utils
    "to_numpy_array",
    "to_torch_tensor",
    "to_column_major",
    "ensure_vector3",
    "ensure_4x4_matrix",
    "ensure_quaternion",
    "is_debug_enabled",
    "debug_print",
]
