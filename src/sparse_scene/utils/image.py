"""Image codec access through OpenCV."""

from __future__ import annotations

import cv2
import numpy as np

from sparse_scene.core.errors import ImageCodecError


def decode_rgb(encoded: bytes) -> np.ndarray:
    """Decode an encoded image (PNG, JPEG, ...) into an (H, W, 3) uint8 RGB array.

    Pixels are returned as stored; EXIF orientation is ignored so the raster
    matches the camera intrinsics.
    """
    buffer = np.frombuffer(encoded, dtype=np.uint8)
    try:
        bgr = cv2.imdecode(buffer, cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION)
    except cv2.error as e:
        raise ImageCodecError(f"Failed to decode image ({len(encoded)} bytes): {e}") from e
    if bgr is None:
        raise ImageCodecError(f"Failed to decode image ({len(encoded)} bytes)")
    return cv2.cvtColor(bgr, cv2.COLOR_BGR2RGB)
