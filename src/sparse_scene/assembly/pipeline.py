"""Join images, cameras and image files into a finished scene or dataset.

One task per image runs on a thread pool. The first failing task aborts the
assembly: tasks that have not started are cancelled, running ones finish and
their results are discarded, and the error is re-raised to the caller.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Iterable

import numpy as np

from sparse_scene.colmap.camera import Cameras, PinholeCamera
from sparse_scene.colmap.image import Image, Images
from sparse_scene.colmap.image_file import ImageFiles
from sparse_scene.colmap.point import Point as ColmapPoint
from sparse_scene.core.errors import UnimplementedError, UnknownCameraIdError
from sparse_scene.scene.types import Point
from sparse_scene.utils.geometry import camera_position
from .adapters import OutputAdapter, Pose

logger = logging.getLogger(__name__)


def derive_pose(image: Image) -> Pose:
    rotation = image.rotation()
    translation = np.asarray(image.translation, dtype=np.float64)
    return Pose(
        rotation=rotation,
        translation=translation,
        position=camera_position(rotation, translation),
        view_transform=image.view_transform(),
    )


def convert_points(points: Iterable[ColmapPoint]) -> list[Point]:
    return [
        Point(color_rgb=point.color_normalized(), position=tuple(point.position))
        for point in points
    ]


def assemble_view(
    image: Image,
    cameras: Cameras,
    image_files: ImageFiles,
    adapter: OutputAdapter,
) -> tuple[int, Any]:
    """Resolve one image against cameras and files and build its output unit."""
    camera = cameras.get(image.camera_id)
    if camera is None:
        raise UnknownCameraIdError(image.camera_id)

    encoded = image_files.take(image.file_name)

    if not isinstance(camera, PinholeCamera):
        raise UnimplementedError(camera.model.name)

    pose = derive_pose(image)
    projection = adapter.derive_projection(camera)
    finished = adapter.finish_image(encoded, image.image_id)
    logger.debug(f"Assembled view {image.image_id} ({image.file_name})")
    return image.image_id, adapter.build_unit(image, camera, pose, projection, finished)


def assemble(
    cameras: Cameras,
    images: Images,
    image_files: ImageFiles,
    points: Iterable[ColmapPoint],
    adapter: OutputAdapter,
    max_workers: int | None = None,
) -> Any:
    """Build the adapter's result from decoded COLMAP collections.

    Raises the first ``ColmapError`` hit by any image; nothing partial is
    returned.
    """
    scene_points = convert_points(points)
    logger.info(
        f"Assembling {len(images)} views and {len(scene_points)} points "
        f"({adapter.name or type(adapter).__name__}, max_workers={max_workers})"
    )

    units: dict[int, Any] = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(assemble_view, image, cameras, image_files, adapter)
            for image in images.values()
        ]
        try:
            for future in as_completed(futures):
                view_id, unit = future.result()
                units[view_id] = unit
        except Exception:
            for future in futures:
                future.cancel()
            raise

    logger.info(f"Assembled {len(units)} views")
    return adapter.build_result(scene_points, units)
