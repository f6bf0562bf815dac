"""Training-oriented dataset: decoded rasters with rotation, translation and field of view."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from sparse_scene.scene.types import Point


@dataclass(frozen=True, eq=False)
class CameraView:
    """One training view.

    ``R`` holds the transpose of the COLMAP rotation (camera-to-world
    rotation) and ``T`` the COLMAP translation, so that the world-to-view
    transform is ``[R^T | T]``.
    """

    camera_id: int
    view_id: int
    image_name: str
    R: np.ndarray
    T: np.ndarray
    field_of_view_x: float
    field_of_view_y: float
    image: np.ndarray  # (H, W, 3) uint8 RGB
    width: int
    height: int
    position: np.ndarray


@dataclass(frozen=True, eq=False)
class Dataset:
    points: list[Point]
    cameras: dict[int, CameraView]
