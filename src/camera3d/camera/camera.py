"""Position/orientation camera model."""

from __future__ import annotations
from typing import Union
import numpy as np
from scipy.spatial.transform import Rotation

from ..utils.validation import DEFAULT_DTYPE, ensure_vector3, ensure_quaternion


# Canonical frame: looking down +Z with +Y up
CANONICAL_RIGHT = (1.0, 0.0, 0.0)
CANONICAL_UP = (0.0, 1.0, 0.0)
CANONICAL_FORWARD = (0.0, 0.0, 1.0)


def rotate_vector(quat: np.ndarray, v) -> np.ndarray:
    """
    Rotate a vector by an XYZW quaternion.

    Evaluates ``v + 2 * q_xyz x (q_xyz x v + w * v)`` as is. The quaternion
    is not normalized: a unit quaternion gives a pure rotation, a zero
    quaternion leaves ``v`` unchanged, and NaN/Inf components propagate.

    Args:
        quat: (4,) quaternion [x, y, z, w]
        v: (3,) vector

    Returns:
        (3,) rotated vector in the dtype of ``quat``
    """
    v = np.asarray(v, dtype=quat.dtype)
    xyz, w = quat[:3], quat[3]

    with np.errstate(invalid="ignore", over="ignore"):
        tmp = np.cross(xyz, v) + v * w
        return np.cross(xyz, tmp) * quat.dtype.type(2) + v


class Camera:
    """
    Camera with a world-space position and a right/up/forward basis.

    The basis is kept consistent through ``right = up x forward``, which is
    recomputed after every orientation change. ``up`` and ``forward`` are
    used as given: they are never renormalized or re-orthogonalized, so a
    non-orthonormal pair supplied by the caller yields a non-orthonormal
    basis.

    Attributes:
        position: (3,) camera position in world space
        up: (3,) up direction
        right: (3,) right direction
        forward: (3,) forward direction
        dtype: Floating-point scalar type of all vectors

    Example:
        >>> cam = Camera([0.0, 2.0, -5.0])
        >>> cam.set_yaw_pitch(0.0, 0.3)
        >>> view = cam.orthogonal()
    """

    def __init__(self, position, dtype=DEFAULT_DTYPE):
        """
        Place the camera at ``position``, looking towards positive z.

        Args:
            position: (3,) camera position [x, y, z]
            dtype: Scalar type (default: float32)
        """
        self.dtype = np.dtype(dtype)
        self.position = ensure_vector3(position, self.dtype)
        self.right = np.array(CANONICAL_RIGHT, dtype=self.dtype)
        self.up = np.array(CANONICAL_UP, dtype=self.dtype)
        self.forward = np.array(CANONICAL_FORWARD, dtype=self.dtype)

    def orthogonal(self) -> np.ndarray:
        """
        Compute the orthogonal (view) matrix for the camera.

        Transforms world coordinates into camera space: rotate into the
        right/up/forward basis after translating by ``-position``, i.e.
        ``R @ T(-position)``.

        Returns:
            (4, 4) row-major view matrix
        """
        p = np.asarray(self.position, dtype=self.dtype)
        r = np.asarray(self.right, dtype=self.dtype)
        u = np.asarray(self.up, dtype=self.dtype)
        f = np.asarray(self.forward, dtype=self.dtype)

        M = np.eye(4, dtype=self.dtype)
        M[0, :3] = r
        M[1, :3] = u
        M[2, :3] = f
        M[:3, 3] = [-np.dot(r, p), -np.dot(u, p), -np.dot(f, p)]

        return M

    def look_at(self, point):
        """
        Orient the camera towards a point.

        Sets ``forward = position - point``. The resulting vector points
        from the target back to the camera and is not normalized. ``right``
        is rebuilt from the current ``up``; ``up`` itself is left as is.

        Args:
            point: (3,) target point in world space
        """
        target = ensure_vector3(point, self.dtype)
        self.forward = np.asarray(self.position, dtype=self.dtype) - target
        self.update_right()

    def set_yaw_pitch(self, yaw: float, pitch: float):
        """
        Set yaw and pitch angle of the camera in radians.

        Yaw turns about the vertical axis, pitch about the local right
        axis. ``(0, 0)`` gives the canonical basis.

        Args:
            yaw: Rotation about +Y (radians)
            pitch: Elevation above the horizontal plane (radians)
        """
        yaw = self.dtype.type(yaw)
        pitch = self.dtype.type(pitch)
        y_s, y_c = np.sin(yaw), np.cos(yaw)
        p_s, p_c = np.sin(pitch), np.cos(pitch)

        self.forward = np.array([y_s * p_c, p_s, y_c * p_c], dtype=self.dtype)
        self.up = np.array([y_s * -p_s, p_c, y_c * -p_s], dtype=self.dtype)
        self.update_right()

    def set_rotation(self, rotation: Union[Rotation, np.ndarray, list]):
        """
        Set forward, up and right from a quaternion rotation.

        The rotation is applied to the canonical forward (+Z) and up (+Y)
        vectors, not to the current basis, so repeated calls do not
        accumulate.

        The quaternion is used without normalization (see ``rotate_vector``).

        Args:
            rotation: ``scipy.spatial.transform.Rotation`` or XYZW quaternion

        Raises:
            ValueError: If the quaternion does not have 4 components
        """
        if isinstance(rotation, Rotation):
            rotation = rotation.as_quat()
        quat = ensure_quaternion(rotation, self.dtype)

        self.forward = rotate_vector(quat, CANONICAL_FORWARD)
        self.up = rotate_vector(quat, CANONICAL_UP)
        self.update_right()

    def update_right(self):
        """Recompute ``right = up x forward``."""
        with np.errstate(invalid="ignore", over="ignore"):
            right = np.cross(self.up, self.forward)
        self.right = np.asarray(right, dtype=self.dtype)

    def copy(self) -> "Camera":
        """Return an independent copy of the camera."""
        other = Camera(self.position, dtype=self.dtype)
        other.right = np.array(self.right, dtype=self.dtype)
        other.up = np.array(self.up, dtype=self.dtype)
        other.forward = np.array(self.forward, dtype=self.dtype)
        return other

    def __repr__(self) -> str:
        return (f"Camera(position={np.asarray(self.position).tolist()}, "
                f"right={np.asarray(self.right).tolist()}, "
                f"up={np.asarray(self.up).tolist()}, "
                f"forward={np.asarray(self.forward).tolist()}, "
                f"dtype={self.dtype.name})")
