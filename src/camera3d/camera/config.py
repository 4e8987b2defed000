"""Camera configuration parser."""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union
import numpy as np
from omegaconf import DictConfig, OmegaConf

from ..utils.validation import ensure_vector3, ensure_4x4_matrix
from ..utils.conversion import to_column_major, to_torch_tensor
from ..utils.debug import debug_print, debug_matrix_info
from .camera import Camera
from .perspective import CameraPerspective
from .mvp import model_view_projection


ConfigLike = Union[Mapping[str, Any], DictConfig]

CONFIG_SECTIONS = ("camera", "perspective")


def _as_dict(cfg: ConfigLike) -> Dict[str, Any]:
    """Resolve an OmegaConf node (or plain mapping) into a plain dict."""
    if isinstance(cfg, DictConfig):
        return OmegaConf.to_container(cfg, resolve=True)
    return dict(cfg)


def load_camera_config(config_path: Union[str, Path]) -> DictConfig:
    """
    Load a camera YAML configuration.

    Args:
        config_path: Path to YAML config file

    Returns:
        OmegaConf configuration object

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If neither a 'camera' nor a 'perspective' section is present
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    if not any(section in config for section in CONFIG_SECTIONS):
        raise ValueError(
            f"Config {config_path} has none of the sections: {', '.join(CONFIG_SECTIONS)}"
        )

    debug_print(f"[Config] Loaded camera configuration from: {config_path}")
    return config


def make_camera_from_config(camera_cfg: ConfigLike) -> Camera:
    """
    Build a Camera from a configuration mapping.

    Args:
        camera_cfg: Camera configuration with keys:
            Optional:
                - position: Camera position [x, y, z] (default: origin)
                - dtype: Scalar type name (default: 'float32')
                - up, forward: Explicit basis vectors [x, y, z]
            At most one orientation source:
                - look_at: Target point [x, y, z]
                - yaw, pitch: Angles in degrees (missing one defaults to 0)
                - rotation: XYZW quaternion [x, y, z, w]

    Returns:
        Configured Camera

    Raises:
        ValueError: On conflicting orientation settings or malformed vectors

    Example:
        >>> cam = make_camera_from_config({
        ...     "position": [0, 2, -5],
        ...     "yaw": 30.0,
        ...     "pitch": -10.0,
        ... })
    """
    cfg = _as_dict(camera_cfg)
    dtype = np.dtype(cfg.get("dtype", "float32"))
    camera = Camera(cfg.get("position", [0.0, 0.0, 0.0]), dtype=dtype)

    sources = []
    if "look_at" in cfg:
        sources.append("look_at")
    if "yaw" in cfg or "pitch" in cfg:
        sources.append("yaw_pitch")
    if "rotation" in cfg:
        sources.append("rotation")

    if len(sources) > 1:
        raise ValueError(f"Conflicting camera orientation settings: {', '.join(sources)}")

    # look_at keeps the current up, so only it may be combined with an explicit up
    if "forward" in cfg and sources:
        raise ValueError(f"'forward' cannot be combined with '{sources[0]}'")
    if "up" in cfg and sources and sources[0] != "look_at":
        raise ValueError(f"'up' cannot be combined with '{sources[0]}'")

    if "up" in cfg:
        camera.up = ensure_vector3(cfg["up"], dtype)
    if "forward" in cfg:
        camera.forward = ensure_vector3(cfg["forward"], dtype)
    if "up" in cfg or "forward" in cfg:
        camera.update_right()

    if "look_at" in cfg:
        camera.look_at(cfg["look_at"])
    elif "yaw" in cfg or "pitch" in cfg:
        camera.set_yaw_pitch(
            np.radians(float(cfg.get("yaw", 0.0))),
            np.radians(float(cfg.get("pitch", 0.0))),
        )
    elif "rotation" in cfg:
        camera.set_rotation(cfg["rotation"])

    debug_print(f"[Camera] {camera!r}")
    return camera


def make_perspective_from_config(perspective_cfg: ConfigLike) -> CameraPerspective:
    """
    Build a CameraPerspective from a configuration mapping.

    Same keys as ``CameraPerspective.from_dict``. When 'aspect_ratio' is
    missing but 'width' and 'height' are given, the ratio is derived from
    the image size.
    """
    cfg = _as_dict(perspective_cfg)

    if "aspect_ratio" not in cfg and "width" in cfg and "height" in cfg:
        cfg["aspect_ratio"] = float(cfg["width"]) / float(cfg["height"])

    perspective = CameraPerspective.from_dict(cfg)
    debug_print(f"[Perspective] {perspective}")
    return perspective


def make_matrices_from_config(
    config: ConfigLike,
    model: Optional[np.ndarray] = None,
    transpose: bool = False,
    device: Optional[str] = None
) -> Tuple[Any, Any, Any]:
    """
    Build view, projection and MVP matrices from configuration.

    Args:
        config: Mapping with 'camera' and 'perspective' sections
        model: (4, 4) model matrix (default: identity)
        transpose: Return column-major matrices for a rasterizer API
        device: If set, return float32 torch tensors on this device

    Returns:
        Tuple of:
            - view (4x4): World-to-camera transform
            - projection (4x4): Perspective projection
            - mvp (4x4): model @ (projection @ view)

    Raises:
        ValueError: If a required section is missing

    Example:
        >>> config = {
        ...     "camera": {"position": [0, 0, 5], "look_at": [0, 0, 0]},
        ...     "perspective": {"fov": 60, "near_clip": 0.1, "far_clip": 100,
        ...                     "width": 1280, "height": 720},
        ... }
        >>> view, proj, mvp = make_matrices_from_config(config)
    """
    cfg = _as_dict(config)

    for section in CONFIG_SECTIONS:
        if section not in cfg:
            raise ValueError(f"Missing required config section: {section}")

    camera = make_camera_from_config(cfg["camera"])
    perspective = make_perspective_from_config(cfg["perspective"])

    view = camera.orthogonal()
    proj = perspective.projection()

    if model is None:
        model = np.eye(4, dtype=view.dtype)
    model = ensure_4x4_matrix(model, view.dtype)

    mvp = model_view_projection(model, view, proj)

    debug_matrix_info("view", view)
    debug_matrix_info("projection", proj)
    debug_matrix_info("mvp", mvp)

    matrices = (view, proj, mvp)
    if transpose:
        matrices = tuple(to_column_major(m) for m in matrices)
    if device is not None:
        matrices = tuple(to_torch_tensor(m, device=device) for m in matrices)
    return matrices
