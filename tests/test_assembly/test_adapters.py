"""Tests for the scene and dataset output adapters."""

import math

import numpy as np
import pytest

from sparse_scene.assembly import DatasetAdapter, SceneAdapter, derive_pose
from sparse_scene.colmap.camera import PinholeCamera
from sparse_scene.colmap.image import Image


def _camera(**overrides) -> PinholeCamera:
    fields = dict(
        id=1,
        width=640,
        height=480,
        focal_length_x=500.0,
        focal_length_y=400.0,
        principal_point_x=320.0,
        principal_point_y=240.0,
    )
    fields.update(overrides)
    return PinholeCamera(**fields)


class TestSceneAdapter:
    def test_centered_principal_point(self):
        P = SceneAdapter(z_near=0.1, z_far=10.0).derive_projection(_camera())
        assert P[0, 0] == pytest.approx(2 * 500.0 / 640)
        assert P[1, 1] == pytest.approx(2 * 400.0 / 480)
        assert P[0, 2] == pytest.approx(0.0)
        assert P[1, 2] == pytest.approx(0.0)
        assert P[3, 2] == 1.0

    def test_depth_range_maps_to_unit_interval(self):
        P = SceneAdapter(z_near=0.1, z_far=10.0).derive_projection(_camera())
        for depth, expected in [(0.1, 0.0), (10.0, 1.0)]:
            clip = P @ np.array([0.0, 0.0, depth, 1.0])
            assert clip[2] / clip[3] == pytest.approx(expected)

    def test_pixel_corner_maps_to_ndc_corner(self):
        """A ray through pixel (0, 0) lands on normalized (-1, -1)."""
        camera = _camera(principal_point_x=300.0, principal_point_y=200.0)
        P = SceneAdapter().derive_projection(camera)
        z = 2.0
        x = (0.0 - camera.principal_point_x) * z / camera.focal_length_x
        y = (0.0 - camera.principal_point_y) * z / camera.focal_length_y
        clip = P @ np.array([x, y, z, 1.0])
        assert clip[0] / clip[3] == pytest.approx(-1.0)
        assert clip[1] / clip[3] == pytest.approx(-1.0)

    def test_invalid_depth_range(self):
        with pytest.raises(ValueError):
            SceneAdapter(z_near=1.0, z_far=0.5).derive_projection(_camera())

    def test_finish_image_keeps_encoded_bytes(self, tiny_png):
        encoded, width, height = SceneAdapter().finish_image(tiny_png, view_id=3)
        assert encoded.image_encoded == tiny_png
        assert encoded.view_id == 3
        assert (width, height) == (1, 1)


class TestDatasetAdapter:
    def test_field_of_view(self):
        fov_x, fov_y = DatasetAdapter().derive_projection(_camera())
        assert fov_x == pytest.approx(2 * math.atan2(640, 2 * 500.0))
        assert fov_y == pytest.approx(2 * math.atan2(480, 2 * 400.0))

    def test_rotation_stored_transposed(self):
        s = math.sqrt(0.5)
        image = Image(
            image_id=1,
            camera_id=1,
            quaternion=(s, 0.0, 0.0, s),
            translation=(1.0, 0.0, 0.0),
            file_name="a.png",
        )
        pose = derive_pose(image)
        raster = np.zeros((2, 3, 3), dtype=np.uint8)
        view = DatasetAdapter().build_unit(image, _camera(), pose, (1.0, 1.0), raster)
        np.testing.assert_allclose(view.R, pose.rotation.T)
        np.testing.assert_allclose(view.T, [1.0, 0.0, 0.0])
        assert (view.width, view.height) == (3, 2)


class TestDerivePose:
    def test_position_is_minus_rt_t(self):
        image = Image(
            image_id=1,
            camera_id=1,
            quaternion=(0.5, 0.5, 0.5, 0.5),
            translation=(1.0, 2.0, 3.0),
            file_name="a.png",
        )
        pose = derive_pose(image)
        np.testing.assert_allclose(pose.position, -pose.rotation.T @ np.array([1.0, 2.0, 3.0]))
        # The camera center maps to the view-space origin.
        center = pose.view_transform @ np.append(pose.position, 1.0)
        np.testing.assert_allclose(center[:3], np.zeros(3), atol=1e-12)
