"""COLMAP binary records: decoders and collections."""

from .camera import Camera, CameraModel, Cameras, PinholeCamera, UnsupportedCamera, decode_camera
from .cursor import advance, read_cstring, read_fixed
from .image import Image, Images, decode_image
from .image_file import ImageFile, ImageFiles
from .point import Point, Points, decode_point

__all__ = [
    "Camera",
    "CameraModel",
    "Cameras",
    "PinholeCamera",
    "UnsupportedCamera",
    "decode_camera",
    "advance",
    "read_cstring",
    "read_fixed",
    "Image",
    "Images",
    "decode_image",
    "ImageFile",
    "ImageFiles",
    "Point",
    "Points",
    "decode_point",
]
