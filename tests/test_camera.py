"""Tests for the Camera position/orientation model."""

import math
import warnings

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from camera3d import Camera
from camera3d.camera.camera import rotate_vector


ATOL = 1e-6


def assert_basis(cam, right, up, forward, atol=ATOL):
    np.testing.assert_allclose(cam.right, right, atol=atol)
    np.testing.assert_allclose(cam.up, up, atol=atol)
    np.testing.assert_allclose(cam.forward, forward, atol=atol)


def test_new_camera_has_canonical_basis(canonical_basis):
    cam = Camera([1.0, 2.0, 3.0])

    np.testing.assert_array_equal(cam.position, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(cam.right, canonical_basis["right"])
    np.testing.assert_array_equal(cam.up, canonical_basis["up"])
    np.testing.assert_array_equal(cam.forward, canonical_basis["forward"])
    assert cam.position.dtype == np.float32


def test_new_camera_rejects_bad_position():
    with pytest.raises(ValueError, match="3-component"):
        Camera([1.0, 2.0])


def test_position_is_copied():
    p = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    cam = Camera(p)
    p[0] = 10.0
    assert cam.position[0] == 1.0


def test_orthogonal_at_origin_is_identity():
    view = Camera([0.0, 0.0, 0.0]).orthogonal()
    np.testing.assert_array_equal(view, np.eye(4))


def test_orthogonal_maps_position_to_origin():
    p = [1.5, -2.0, 7.25]
    cam = Camera(p)
    out = cam.orthogonal() @ np.array(p + [1.0], dtype=np.float32)
    np.testing.assert_allclose(out, [0.0, 0.0, 0.0, 1.0], atol=ATOL)


def test_orthogonal_layout():
    cam = Camera([1.0, 2.0, 3.0])
    cam.set_yaw_pitch(0.4, -0.2)
    view = cam.orthogonal()

    np.testing.assert_allclose(view[0, :3], cam.right)
    np.testing.assert_allclose(view[1, :3], cam.up)
    np.testing.assert_allclose(view[2, :3], cam.forward)
    np.testing.assert_allclose(
        view[:3, 3],
        [-np.dot(cam.right, cam.position),
         -np.dot(cam.up, cam.position),
         -np.dot(cam.forward, cam.position)],
        rtol=1e-6, atol=1e-6,
    )
    np.testing.assert_array_equal(view[3], [0.0, 0.0, 0.0, 1.0])


def test_orthogonal_is_rotation_after_translation():
    cam = Camera([4.0, -1.0, 2.0], dtype=np.float64)
    cam.set_yaw_pitch(1.1, 0.3)

    R = np.eye(4)
    R[0, :3], R[1, :3], R[2, :3] = cam.right, cam.up, cam.forward
    T = np.eye(4)
    T[:3, 3] = -cam.position

    np.testing.assert_allclose(cam.orthogonal(), R @ T, atol=1e-12)


def test_look_at_points_forward_away_from_target():
    cam = Camera([0.0, 0.0, 5.0])
    cam.look_at([0.0, 0.0, 0.0])

    np.testing.assert_array_equal(cam.forward, [0.0, 0.0, 5.0])
    np.testing.assert_array_equal(cam.right, [5.0, 0.0, 0.0])
    np.testing.assert_array_equal(cam.up, [0.0, 1.0, 0.0])
    np.testing.assert_array_equal(cam.position, [0.0, 0.0, 5.0])


def test_look_at_keeps_right_orthogonal():
    cam = Camera([3.0, 0.0, 0.0])
    cam.look_at([0.0, 0.0, 0.0])

    np.testing.assert_allclose(cam.right, [0.0, 0.0, -3.0])
    assert np.dot(cam.right, cam.up) == pytest.approx(0.0, abs=ATOL)
    assert np.dot(cam.right, cam.forward) == pytest.approx(0.0, abs=ATOL)


def test_set_yaw_pitch_zero_is_canonical(canonical_basis):
    cam = Camera([0.0, 0.0, 0.0])
    cam.set_yaw_pitch(0.0, 0.0)
    assert_basis(cam, **canonical_basis)


def test_set_yaw_pitch_quarter_turn():
    cam = Camera([0.0, 0.0, 0.0])
    cam.set_yaw_pitch(math.pi / 2, 0.0)
    assert_basis(cam, right=[0.0, 0.0, -1.0], up=[0.0, 1.0, 0.0], forward=[1.0, 0.0, 0.0])


@pytest.mark.parametrize("yaw, pitch", [
    (0.3, 0.0),
    (-1.2, 0.7),
    (2.5, -1.3),
    (math.pi, math.pi / 4),
])
def test_set_yaw_pitch_gives_orthonormal_basis(yaw, pitch):
    cam = Camera([1.0, 1.0, 1.0])
    cam.set_yaw_pitch(yaw, pitch)

    for v in (cam.right, cam.up, cam.forward):
        assert np.linalg.norm(v) == pytest.approx(1.0, abs=ATOL)
    assert np.dot(cam.up, cam.forward) == pytest.approx(0.0, abs=ATOL)
    assert np.dot(cam.right, cam.up) == pytest.approx(0.0, abs=ATOL)
    assert np.dot(cam.right, cam.forward) == pytest.approx(0.0, abs=ATOL)
    np.testing.assert_array_equal(cam.position, [1.0, 1.0, 1.0])


def test_set_rotation_identity_matches_zero_yaw_pitch():
    a = Camera([0.0, 0.0, 0.0])
    a.set_rotation([0.0, 0.0, 0.0, 1.0])
    b = Camera([0.0, 0.0, 0.0])
    b.set_yaw_pitch(0.0, 0.0)

    assert_basis(a, right=b.right, up=b.up, forward=b.forward)


def test_set_rotation_about_y_matches_yaw():
    a = Camera([0.0, 0.0, 0.0])
    a.set_rotation(Rotation.from_euler("y", 90, degrees=True))
    b = Camera([0.0, 0.0, 0.0])
    b.set_yaw_pitch(math.pi / 2, 0.0)

    assert_basis(a, right=b.right, up=b.up, forward=b.forward)


def test_set_rotation_about_x_matches_pitch():
    pitch = 0.6
    a = Camera([0.0, 0.0, 0.0])
    a.set_rotation(Rotation.from_euler("x", -pitch).as_quat())
    b = Camera([0.0, 0.0, 0.0])
    b.set_yaw_pitch(0.0, pitch)

    assert_basis(a, right=b.right, up=b.up, forward=b.forward)


def test_set_rotation_is_not_cumulative():
    rot = Rotation.from_euler("xyz", [10, 20, 30], degrees=True)
    cam = Camera([2.0, 0.0, 0.0])
    cam.set_rotation(rot)
    first = (cam.right.copy(), cam.up.copy(), cam.forward.copy())
    cam.set_rotation(rot)

    assert_basis(cam, *first)
    np.testing.assert_array_equal(cam.position, [2.0, 0.0, 0.0])
    assert np.dot(cam.right, cam.up) == pytest.approx(0.0, abs=ATOL)
    assert np.dot(cam.right, cam.forward) == pytest.approx(0.0, abs=ATOL)


def test_set_rotation_rejects_wrong_shape():
    cam = Camera([0.0, 0.0, 0.0])
    with pytest.raises(ValueError, match="XYZW"):
        cam.set_rotation([0.0, 0.0, 1.0])


def test_set_rotation_zero_quaternion_keeps_canonical_basis(canonical_basis):
    cam = Camera([0.0, 0.0, 0.0], dtype=np.float64)
    cam.set_rotation([0.0, 0.0, 0.0, 0.0])

    np.testing.assert_array_equal(cam.forward, canonical_basis["forward"])
    np.testing.assert_array_equal(cam.up, canonical_basis["up"])
    np.testing.assert_array_equal(cam.right, canonical_basis["right"])


def test_set_rotation_non_unit_quaternion_is_not_normalized():
    cam = Camera([0.0, 0.0, 0.0], dtype=np.float64)
    cam.set_rotation([0.0, 1.0, 0.0, 1.0])

    np.testing.assert_allclose(cam.forward, [2.0, 0.0, -1.0], atol=1e-12)
    np.testing.assert_allclose(cam.up, [0.0, 1.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(cam.right, [-1.0, 0.0, -2.0], atol=1e-12)


@pytest.mark.parametrize("quat", [
    [0.0, np.nan, 0.0, 1.0],
    [np.inf, 0.0, 0.0, 1.0],
])
def test_set_rotation_non_finite_quaternion_propagates(quat):
    cam = Camera([1.0, 2.0, 3.0], dtype=np.float64)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        cam.set_rotation(quat)

    assert not np.isfinite(cam.forward).all()
    assert not np.isfinite(cam.right).all()
    np.testing.assert_array_equal(cam.position, [1.0, 2.0, 3.0])


def test_rotate_vector_matches_scipy_for_unit_quaternions():
    rot = Rotation.from_euler("zyx", [25, -40, 70], degrees=True)
    quat = rot.as_quat()

    for v in ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.3, -2.0, 1.5]):
        np.testing.assert_allclose(rotate_vector(quat, v), rot.apply(v), atol=1e-12)


def test_update_right_does_not_renormalize():
    cam = Camera([0.0, 0.0, 0.0])
    cam.up = np.array([0.0, 2.0, 0.0], dtype=np.float32)
    cam.update_right()

    np.testing.assert_array_equal(cam.right, [2.0, 0.0, 0.0])
    np.testing.assert_array_equal(cam.up, [0.0, 2.0, 0.0])


def test_double_precision_camera():
    cam = Camera([1.0, 2.0, 3.0], dtype=np.float64)
    cam.set_yaw_pitch(0.25, 0.5)

    assert cam.forward.dtype == np.float64
    assert cam.right.dtype == np.float64
    assert cam.orthogonal().dtype == np.float64


def test_copy_is_independent():
    cam = Camera([1.0, 2.0, 3.0])
    cam.set_yaw_pitch(0.5, 0.1)
    other = cam.copy()
    other.position[0] = 99.0
    other.set_yaw_pitch(0.0, 0.0)

    assert cam.position[0] == 1.0
    assert cam.forward[0] == pytest.approx(math.sin(0.5) * math.cos(0.1), rel=1e-6)
    assert "Camera(position=[1.0, 2.0, 3.0]" in repr(cam)
