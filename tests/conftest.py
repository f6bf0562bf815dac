"""Shared pytest fixtures: COLMAP binary record builders and a tiny project layout."""

import io
import struct
from pathlib import Path

import pytest

# 1x1 RGBA PNG, pixel (0xff, 0x00, 0x3d, 0xff)
TINY_PNG = bytes([
    0x89, 0x50, 0x4e, 0x47, 0x0d, 0x0a, 0x1a, 0x0a, 0x00, 0x00,
    0x00, 0x0d, 0x49, 0x48, 0x44, 0x52, 0x00, 0x00, 0x00, 0x01,
    0x00, 0x00, 0x00, 0x01, 0x08, 0x06, 0x00, 0x00, 0x00, 0x1f,
    0x15, 0xc4, 0x89, 0x00, 0x00, 0x00, 0x01, 0x73, 0x52, 0x47,
    0x42, 0x00, 0xae, 0xce, 0x1c, 0xe9, 0x00, 0x00, 0x00, 0x44,
    0x65, 0x58, 0x49, 0x66, 0x4d, 0x4d, 0x00, 0x2a, 0x00, 0x00,
    0x00, 0x08, 0x00, 0x01, 0x87, 0x69, 0x00, 0x04, 0x00, 0x00,
    0x00, 0x01, 0x00, 0x00, 0x00, 0x1a, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x03, 0xa0, 0x01, 0x00, 0x03, 0x00, 0x00, 0x00, 0x01,
    0x00, 0x01, 0x00, 0x00, 0xa0, 0x02, 0x00, 0x04, 0x00, 0x00,
    0x00, 0x01, 0x00, 0x00, 0x00, 0x01, 0xa0, 0x03, 0x00, 0x04,
    0x00, 0x00, 0x00, 0x01, 0x00, 0x00, 0x00, 0x01, 0x00, 0x00,
    0x00, 0x00, 0xf9, 0x22, 0x9d, 0xfe, 0x00, 0x00, 0x00, 0x0d,
    0x49, 0x44, 0x41, 0x54, 0x08, 0x1d, 0x63, 0xf8, 0xcf, 0x60,
    0xdb, 0x0d, 0x00, 0x05, 0x06, 0x01, 0xc8, 0x5d, 0xd6, 0x92,
    0xd1, 0x00, 0x00, 0x00, 0x00, 0x49, 0x45, 0x4e, 0x44, 0xae,
    0x42, 0x60, 0x82,
])


class ColmapWriter:
    """Encodes COLMAP binary records the way COLMAP writes them."""

    @staticmethod
    def camera(camera_id=1, model_id=1, width=4, height=4, params=(2.0, 2.0, 2.0, 2.0)) -> bytes:
        return (
            struct.pack("<IiQQ", camera_id, model_id, width, height)
            + struct.pack(f"<{len(params)}d", *params)
        )

    @staticmethod
    def image(
        image_id=7,
        camera_id=1,
        qvec=(1.0, 0.0, 0.0, 0.0),
        tvec=(0.0, 0.0, 0.0),
        name="a.png",
        points2d=(),
    ) -> bytes:
        data = struct.pack("<I4d3dI", image_id, *qvec, *tvec, camera_id)
        data += name.encode("utf-8") + b"\x00"
        data += struct.pack("<Q", len(points2d))
        for x, y, point3d_id in points2d:
            data += struct.pack("<ddq", x, y, point3d_id)
        return data

    @staticmethod
    def point(point_id=1, xyz=(0.0, 0.0, 0.0), rgb=(0, 0, 0), error=0.0, track=()) -> bytes:
        data = struct.pack("<Q3d3Bd", point_id, *xyz, *rgb, error)
        data += struct.pack("<Q", len(track))
        for image_id, point2d_idx in track:
            data += struct.pack("<II", image_id, point2d_idx)
        return data

    @staticmethod
    def container(*records: bytes) -> bytes:
        return struct.pack("<Q", len(records)) + b"".join(records)

    @staticmethod
    def stream(*chunks: bytes) -> io.BytesIO:
        return io.BytesIO(b"".join(chunks))


@pytest.fixture
def writer() -> ColmapWriter:
    return ColmapWriter()


@pytest.fixture
def tiny_png() -> bytes:
    return TINY_PNG


@pytest.fixture
def colmap_project(tmp_path: Path, writer: ColmapWriter) -> Path:
    """COLMAP project with one pinhole camera, two images and three points."""
    sparse_dir = tmp_path / "sparse" / "0"
    images_dir = tmp_path / "images"
    sparse_dir.mkdir(parents=True)
    images_dir.mkdir()

    (sparse_dir / "cameras.bin").write_bytes(writer.container(writer.camera()))
    (sparse_dir / "images.bin").write_bytes(writer.container(
        writer.image(image_id=7, name="a.png", points2d=[(1.0, 2.0, 3), (4.0, 5.0, -1)]),
        writer.image(image_id=8, name="b.png", tvec=(1.0, 2.0, 3.0)),
    ))
    (sparse_dir / "points3D.bin").write_bytes(writer.container(
        writer.point(point_id=1, xyz=(1.0, 2.0, 3.0), rgb=(255, 0, 51), track=[(7, 0)]),
        writer.point(point_id=2, xyz=(-1.0, 0.5, 2.0), rgb=(0, 0, 0)),
        writer.point(point_id=3, xyz=(0.0, 0.0, 9.0), rgb=(255, 255, 255), track=[(7, 1), (8, 0)]),
    ))
    (images_dir / "a.png").write_bytes(TINY_PNG)
    (images_dir / "b.png").write_bytes(TINY_PNG)
    return tmp_path
