"""COLMAP sparse points (points3D.bin).

Record layout, little-endian:
    point3d_id u64 | x y z f64 | r g b u8 | error f64 | track_length u64 |
    (image_id u32, point2d_idx u32) * track_length

Id, error and track are skipped; points carry no identity downstream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO

from .base import read_record_count
from .cursor import advance, read_fixed

logger = logging.getLogger(__name__)

TRACK_ELEMENT_SIZE = 8


@dataclass(frozen=True)
class Point:
    position: tuple[float, float, float]
    color: tuple[int, int, int]

    def color_normalized(self) -> tuple[float, float, float]:
        """RGB color scaled to [0, 1]."""
        r, g, b = self.color
        return (r / 255.0, g / 255.0, b / 255.0)


def decode_point(stream: BinaryIO) -> Point:
    """Decode one point record."""
    advance(stream, 8)
    position = read_fixed(stream, "d", 3)
    color = read_fixed(stream, "B", 3)
    advance(stream, 8)
    (track_length,) = read_fixed(stream, "Q")
    advance(stream, TRACK_ELEMENT_SIZE * track_length)
    return Point(position=position, color=color)


class Points(list):
    """Points in source order. The order carries no meaning downstream."""

    @classmethod
    def decode(cls, stream: BinaryIO) -> Points:
        count = read_record_count(stream)
        points = cls(decode_point(stream) for _ in range(count))
        logger.debug(f"Decoded {len(points)} point records")
        return points
