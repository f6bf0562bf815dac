"""Pose and projection math for COLMAP cameras."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def qvec2rotmat(qvec: Sequence[float] | np.ndarray) -> np.ndarray:
    """Convert unit quaternion (w, x, y, z) to 3x3 rotation matrix."""
    w, x, y, z = qvec
    return np.array([
        [1 - 2*y*y - 2*z*z, 2*x*y - 2*w*z, 2*x*z + 2*w*y],
        [2*x*y + 2*w*z, 1 - 2*x*x - 2*z*z, 2*y*z - 2*w*x],
        [2*x*z - 2*w*y, 2*y*z + 2*w*x, 1 - 2*x*x - 2*y*y],
    ], dtype=np.float64)


def make_w2c(qvec: Sequence[float], tvec: Sequence[float]) -> np.ndarray:
    """Build 4x4 world-to-camera matrix from COLMAP quaternion + translation."""
    w2c = np.eye(4)
    w2c[:3, :3] = qvec2rotmat(qvec)
    w2c[:3, 3] = tvec
    return w2c


def camera_position(rotation: np.ndarray, tvec: Sequence[float]) -> np.ndarray:
    """Camera center in world space: -R^T t."""
    return -rotation.T @ np.asarray(tvec, dtype=np.float64)


def focal2fov(focal: float, size: float) -> float:
    """Full field of view (radians) spanned by ``size`` pixels at ``focal``."""
    return 2 * math.atan2(size, 2 * focal)


def projection_transform(
    fx: float,
    fy: float,
    cx: float,
    cy: float,
    width: float,
    height: float,
    z_near: float,
    z_far: float,
) -> np.ndarray:
    """4x4 view-to-clip transform for a pinhole camera.

    Maps camera space (x right, y down, z forward) to clip space whose
    normalized x/y span [-1, 1] over the image and whose depth spans
    [0, 1] between ``z_near`` and ``z_far``.
    """
    if not 0 < z_near < z_far:
        raise ValueError(f"Invalid depth range: near={z_near}, far={z_far}")
    P = np.zeros((4, 4))
    P[0, 0] = 2 * fx / width
    P[0, 2] = 2 * cx / width - 1
    P[1, 1] = 2 * fy / height
    P[1, 2] = 2 * cy / height - 1
    P[2, 2] = z_far / (z_far - z_near)
    P[2, 3] = -(z_far * z_near) / (z_far - z_near)
    P[3, 2] = 1.0
    return P
