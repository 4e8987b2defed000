"""Camera system for 3D rendering."""

from .camera import Camera
from .perspective import CameraPerspective, PROJECTION_PI
from .mvp import model_view_projection
from .config import (
    load_camera_config,
    make_camera_from_config,
    make_perspective_from_config,
    make_matrices_from_config,
)

__all__ = [
    "Camera",
    "CameraPerspective",
    "PROJECTION_PI",
    "model_view_projection",
    "load_camera_config",
    "make_camera_from_config",
    "make_perspective_from_config",
    "make_matrices_from_config",
]
