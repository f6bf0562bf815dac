"""COLMAP image pose records (images.bin).

Record layout, little-endian:
    image_id u32 | qw qx qy qz f64 | tx ty tz f64 | camera_id u32 |
    name (NUL-terminated) | num_points2d u64 | (x f64, y f64, point3d_id i64) * num_points2d

The 2D observations are skipped, not materialized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

import numpy as np

from sparse_scene.utils.geometry import make_w2c, qvec2rotmat

from .base import KeyedRecords
from .cursor import advance, read_cstring, read_fixed

POINT2D_RECORD_SIZE = 24


@dataclass(frozen=True)
class Image:
    """Camera-from-world pose of one registered image."""

    image_id: int
    camera_id: int
    quaternion: tuple[float, float, float, float]  # (w, x, y, z)
    translation: tuple[float, float, float]
    file_name: str

    def rotation(self) -> np.ndarray:
        return qvec2rotmat(self.quaternion)

    def view_transform(self) -> np.ndarray:
        """4x4 world-to-view transform."""
        return make_w2c(self.quaternion, self.translation)


def decode_image(stream: BinaryIO) -> Image:
    """Decode one image record."""
    (image_id,) = read_fixed(stream, "I")
    quaternion = read_fixed(stream, "d", 4)
    translation = read_fixed(stream, "d", 3)
    (camera_id,) = read_fixed(stream, "I")
    file_name = read_cstring(stream)
    (num_points2d,) = read_fixed(stream, "Q")
    advance(stream, POINT2D_RECORD_SIZE * num_points2d)

    return Image(
        image_id=image_id,
        camera_id=camera_id,
        quaternion=quaternion,
        translation=translation,
        file_name=file_name,
    )


class Images(KeyedRecords):
    """image_id -> Image."""

    kind = "image"
    decode_record = staticmethod(decode_image)
    record_key = staticmethod(lambda image: image.image_id)
