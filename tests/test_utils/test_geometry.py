"""Tests for sparse_scene.utils.geometry."""

import math

import numpy as np
import pytest

from sparse_scene.utils.geometry import (
    camera_position,
    focal2fov,
    make_w2c,
    projection_transform,
    qvec2rotmat,
)


class TestQuaternionConversion:
    def test_identity(self):
        """Identity quaternion (1,0,0,0) -> identity rotation."""
        np.testing.assert_allclose(qvec2rotmat([1, 0, 0, 0]), np.eye(3), atol=1e-10)

    def test_90deg_z(self):
        angle = math.pi / 2
        R = qvec2rotmat([math.cos(angle / 2), 0, 0, math.sin(angle / 2)])
        expected = np.array([
            [0, -1, 0],
            [1, 0, 0],
            [0, 0, 1],
        ], dtype=float)
        np.testing.assert_allclose(R, expected, atol=1e-10)

    def test_orthogonal(self):
        s = np.sqrt(0.5)
        R = qvec2rotmat([s, 0.0, s, 0.0])
        np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-10)
        assert np.linalg.det(R) == pytest.approx(1.0)


class TestMakeW2C:
    def test_identity_pose(self):
        np.testing.assert_allclose(make_w2c([1, 0, 0, 0], [0, 0, 0]), np.eye(4), atol=1e-10)

    def test_translation(self):
        w2c = make_w2c([1, 0, 0, 0], [1.0, 2.0, 3.0])
        np.testing.assert_allclose(w2c[:3, 3], [1.0, 2.0, 3.0])


class TestCameraPosition:
    def test_identity_rotation(self):
        np.testing.assert_allclose(camera_position(np.eye(3), [1.0, 2.0, 3.0]), [-1.0, -2.0, -3.0])

    def test_matches_inverse_transform(self):
        qvec, tvec = [0.5, 0.5, 0.5, 0.5], [1.0, 2.0, 3.0]
        c2w = np.linalg.inv(make_w2c(qvec, tvec))
        np.testing.assert_allclose(camera_position(qvec2rotmat(qvec), tvec), c2w[:3, 3], atol=1e-10)


class TestFocal2Fov:
    def test_right_angle(self):
        assert focal2fov(2.0, 4) == pytest.approx(math.pi / 2)

    def test_long_focal_narrows(self):
        assert focal2fov(1000.0, 640) < focal2fov(100.0, 640)


class TestProjectionTransform:
    def test_rejects_bad_depth_range(self):
        with pytest.raises(ValueError):
            projection_transform(1, 1, 0, 0, 2, 2, z_near=0.0, z_far=1.0)

    def test_principal_point_offset(self):
        P = projection_transform(100, 100, 0, 0, 200, 100, z_near=0.1, z_far=10.0)
        assert P[0, 2] == pytest.approx(-1.0)
        assert P[1, 2] == pytest.approx(-1.0)
