"""Rendering-oriented scene: encoded images with view and projection transforms."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from sparse_scene.utils.image import decode_rgb


@dataclass(frozen=True)
class Point:
    """Sparse point with color normalized to [0, 1]."""

    color_rgb: tuple[float, float, float]
    position: tuple[float, float, float]


@dataclass(frozen=True)
class EncodedImage:
    """Encoded image bytes owned by a view; decoded on request."""

    image_encoded: bytes
    view_id: int

    def decode_rgb(self) -> np.ndarray:
        return decode_rgb(self.image_encoded)

    def __repr__(self) -> str:
        return f"EncodedImage(len={len(self.image_encoded)}, view_id={self.view_id})"


@dataclass(frozen=True, eq=False)
class View:
    view_id: int
    image_file_name: str
    image: EncodedImage
    image_width: int
    image_height: int
    projection_transform: np.ndarray  # 4x4 view -> clip
    view_transform: np.ndarray  # 4x4 world -> view
    position: np.ndarray  # camera center in world space


@dataclass(frozen=True, eq=False)
class Scene:
    points: list[Point]
    views: dict[int, View]
