"""Load a COLMAP binary export and convert it to a scene or dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sparse_scene.assembly import DatasetAdapter, SceneAdapter, assemble
from sparse_scene.core.contracts import CameraSummary, SourceSummary
from sparse_scene.dataset.types import Dataset
from sparse_scene.scene.types import Scene
from .camera import Camera, Cameras, PinholeCamera
from .image import Images
from .image_file import ImageFiles
from .point import Points

logger = logging.getLogger(__name__)

CAMERAS_FILE = "cameras.bin"
IMAGES_FILE = "images.bin"
POINTS_FILE = "points3D.bin"


@dataclass
class ColmapSource:
    cameras: Cameras
    images: Images
    image_files: ImageFiles
    points: Points

    @classmethod
    def from_directory(cls, sparse_dir: Path, images_dir: Path) -> ColmapSource:
        """Decode cameras/images/points3D.bin and register the referenced image files."""
        sparse_dir = Path(sparse_dir)
        for file_name in (CAMERAS_FILE, IMAGES_FILE, POINTS_FILE):
            if not (sparse_dir / file_name).exists():
                raise FileNotFoundError(f"{file_name} not found in {sparse_dir}")

        with open(sparse_dir / CAMERAS_FILE, "rb") as f:
            cameras = Cameras.decode(f)
        with open(sparse_dir / IMAGES_FILE, "rb") as f:
            images = Images.decode(f)
        with open(sparse_dir / POINTS_FILE, "rb") as f:
            points = Points.decode(f)
        logger.info(
            f"Loaded: {len(cameras)} cameras, {len(images)} images, {len(points)} 3D points"
        )

        image_files = ImageFiles.from_directory(
            images_dir, names=[image.file_name for image in images.values()]
        )
        return cls(cameras=cameras, images=images, image_files=image_files, points=points)

    def to_scene(
        self, z_near: float = 0.01, z_far: float = 100.0, max_workers: int | None = None
    ) -> Scene:
        adapter = SceneAdapter(z_near=z_near, z_far=z_far)
        return assemble(
            self.cameras, self.images, self.image_files, self.points, adapter, max_workers
        )

    def to_dataset(self, max_workers: int | None = None) -> Dataset:
        return assemble(
            self.cameras, self.images, self.image_files, self.points, DatasetAdapter(), max_workers
        )

    def __repr__(self) -> str:
        return (
            f"ColmapSource(cameras={len(self.cameras)}, images={len(self.images)}, "
            f"image_files={len(self.image_files)}, points={len(self.points)})"
        )

    def summary(self) -> SourceSummary:
        cameras = [
            CameraSummary(
                camera_id=camera.id,
                model=camera.model.name,
                width=camera.width,
                height=camera.height,
                params=_camera_params(camera),
            )
            for camera in sorted(self.cameras.values(), key=lambda c: c.id)
        ]
        return SourceSummary(
            num_cameras=len(self.cameras),
            num_images=len(self.images),
            num_points=len(self.points),
            num_image_files=len(self.image_files),
            cameras=cameras,
        )


def _camera_params(camera: Camera) -> list[float]:
    if isinstance(camera, PinholeCamera):
        return [
            camera.focal_length_x,
            camera.focal_length_y,
            camera.principal_point_x,
            camera.principal_point_y,
        ]
    return list(camera.params)
