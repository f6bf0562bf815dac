"""COLMAP camera records (cameras.bin).

Record layout, little-endian:
    camera_id u32 | model_id i32 | width u64 | height u64 | params f64 * N

N is fixed by the model id. Only the PINHOLE model is projected downstream;
the other models of the format are still decoded so that the stream stays
aligned, and are rejected when a view is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, ClassVar, Union

from sparse_scene.core.errors import InvalidRecordError, UnsupportedCameraModelError
from .base import KeyedRecords
from .cursor import read_fixed


class CameraModel(Enum):
    """COLMAP camera models as (model_id, num_params)."""

    SIMPLE_PINHOLE = (0, 3)
    PINHOLE = (1, 4)
    SIMPLE_RADIAL = (2, 4)
    RADIAL = (3, 5)
    OPENCV = (4, 8)
    OPENCV_FISHEYE = (5, 8)
    FULL_OPENCV = (6, 12)
    FOV = (7, 5)
    SIMPLE_RADIAL_FISHEYE = (8, 4)
    RADIAL_FISHEYE = (9, 5)
    THIN_PRISM_FISHEYE = (10, 12)

    def __init__(self, model_id: int, num_params: int):
        self.model_id = model_id
        self.num_params = num_params

    @classmethod
    def from_id(cls, model_id: int) -> CameraModel:
        for model in cls:
            if model.model_id == model_id:
                return model
        raise UnsupportedCameraModelError(model_id)


@dataclass(frozen=True)
class PinholeCamera:
    """Pinhole intrinsics: separate x/y focal lengths, no distortion."""

    id: int
    width: int
    height: int
    focal_length_x: float
    focal_length_y: float
    principal_point_x: float
    principal_point_y: float

    model: ClassVar[CameraModel] = CameraModel.PINHOLE


@dataclass(frozen=True)
class UnsupportedCamera:
    """A camera of a known COLMAP model that is not projected by this package."""

    id: int
    model: CameraModel
    width: int
    height: int
    params: tuple[float, ...]


Camera = Union[PinholeCamera, UnsupportedCamera]


def decode_camera(stream: BinaryIO) -> Camera:
    """Decode one camera record."""
    camera_id, model_id = read_fixed(stream, "I") + read_fixed(stream, "i")
    model = CameraModel.from_id(model_id)
    width, height = read_fixed(stream, "Q", 2)
    params = read_fixed(stream, "d", model.num_params)

    if width == 0 or height == 0:
        raise InvalidRecordError(f"Camera {camera_id} has zero size: {width}x{height}")

    if model is CameraModel.PINHOLE:
        fx, fy, cx, cy = params
        return PinholeCamera(
            id=camera_id,
            width=width,
            height=height,
            focal_length_x=fx,
            focal_length_y=fy,
            principal_point_x=cx,
            principal_point_y=cy,
        )
    return UnsupportedCamera(id=camera_id, model=model, width=width, height=height, params=params)


class Cameras(KeyedRecords):
    """camera_id -> Camera."""

    kind = "camera"
    decode_record = staticmethod(decode_camera)
    record_key = staticmethod(lambda camera: camera.id)
