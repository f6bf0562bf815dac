"""Output adapters: what each target shape keeps from an assembled view.

The pipeline resolves cameras and files once; an adapter only decides which
projection parameters and which image form end up in the result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

import numpy as np

from sparse_scene.colmap.camera import PinholeCamera
from sparse_scene.colmap.image import Image
from sparse_scene.dataset.types import CameraView, Dataset
from sparse_scene.scene.types import EncodedImage, Point, Scene, View
from sparse_scene.utils.geometry import focal2fov, projection_transform
from sparse_scene.utils.image import decode_rgb

ProjectionT = TypeVar("ProjectionT")
FinishedT = TypeVar("FinishedT")
UnitT = TypeVar("UnitT")


@dataclass(frozen=True, eq=False)
class Pose:
    """Pose values derived from a COLMAP quaternion + translation."""

    rotation: np.ndarray  # 3x3 world -> camera
    translation: np.ndarray
    position: np.ndarray  # camera center in world space
    view_transform: np.ndarray  # 4x4 world -> camera


class OutputAdapter(ABC, Generic[ProjectionT, FinishedT, UnitT]):
    """Target-shape hooks called by ``assemble``.

    ``derive_projection`` and ``finish_image`` run on worker threads and
    must not share mutable state.
    """

    name: ClassVar[str] = ""

    @abstractmethod
    def derive_projection(self, camera: PinholeCamera) -> ProjectionT:
        ...

    @abstractmethod
    def finish_image(self, encoded: bytes, view_id: int) -> FinishedT:
        ...

    @abstractmethod
    def build_unit(
        self,
        image: Image,
        camera: PinholeCamera,
        pose: Pose,
        projection: ProjectionT,
        finished: FinishedT,
    ) -> UnitT:
        ...

    @abstractmethod
    def build_result(self, points: list[Point], units: dict[int, UnitT]) -> Any:
        ...


class SceneAdapter(OutputAdapter[np.ndarray, tuple[EncodedImage, int, int], View]):
    """Rendering shape: projection transform + encoded image bytes."""

    name: ClassVar[str] = "scene"

    def __init__(self, z_near: float = 0.01, z_far: float = 100.0):
        self.z_near = z_near
        self.z_far = z_far

    def derive_projection(self, camera: PinholeCamera) -> np.ndarray:
        return projection_transform(
            camera.focal_length_x,
            camera.focal_length_y,
            camera.principal_point_x,
            camera.principal_point_y,
            camera.width,
            camera.height,
            self.z_near,
            self.z_far,
        )

    def finish_image(self, encoded: bytes, view_id: int) -> tuple[EncodedImage, int, int]:
        height, width = decode_rgb(encoded).shape[:2]
        return EncodedImage(image_encoded=encoded, view_id=view_id), width, height

    def build_unit(self, image, camera, pose, projection, finished) -> View:
        encoded_image, width, height = finished
        return View(
            view_id=image.image_id,
            image_file_name=image.file_name,
            image=encoded_image,
            image_width=width,
            image_height=height,
            projection_transform=projection,
            view_transform=pose.view_transform,
            position=pose.position,
        )

    def build_result(self, points: list[Point], units: dict[int, View]) -> Scene:
        return Scene(points=points, views=units)


class DatasetAdapter(OutputAdapter[tuple[float, float], np.ndarray, CameraView]):
    """Training shape: field of view + decoded RGB raster."""

    name: ClassVar[str] = "dataset"

    def derive_projection(self, camera: PinholeCamera) -> tuple[float, float]:
        return (
            focal2fov(camera.focal_length_x, camera.width),
            focal2fov(camera.focal_length_y, camera.height),
        )

    def finish_image(self, encoded: bytes, view_id: int) -> np.ndarray:
        return decode_rgb(encoded)

    def build_unit(self, image, camera, pose, projection, finished) -> CameraView:
        fov_x, fov_y = projection
        height, width = finished.shape[:2]
        return CameraView(
            camera_id=camera.id,
            view_id=image.image_id,
            image_name=image.file_name,
            R=pose.rotation.T.copy(),
            T=pose.translation,
            field_of_view_x=fov_x,
            field_of_view_y=fov_y,
            image=finished,
            width=width,
            height=height,
            position=pose.position,
        )

    def build_result(self, points: list[Point], units: dict[int, CameraView]) -> Dataset:
        return Dataset(points=points, cameras=units)
