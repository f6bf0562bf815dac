"""Byte-cursor primitives shared by every COLMAP record decoder."""

from __future__ import annotations

import struct
from typing import BinaryIO

from sparse_scene.core.errors import InvalidRecordError, ReadError, UnexpectedEofError

# Upper bound on a single read while skipping; counts come from the file.
SKIP_CHUNK_SIZE = 1 << 20


def _read_exact(stream: BinaryIO, n_bytes: int) -> bytes:
    try:
        data = stream.read(n_bytes)
    except OSError as e:
        raise ReadError(f"Failed to read {n_bytes} bytes: {e}") from e
    if len(data) != n_bytes:
        raise UnexpectedEofError(n_bytes, len(data))
    return data


def advance(stream: BinaryIO, n_bytes: int) -> None:
    """Skip exactly ``n_bytes`` of the stream.

    Skips in bounded reads, so a corrupt count fails with
    ``UnexpectedEofError`` at the end of the data instead of a huge
    allocation.
    """
    if n_bytes < 0:
        raise ValueError(f"Cannot advance by a negative count: {n_bytes}")
    remaining = n_bytes
    while remaining:
        try:
            data = stream.read(min(remaining, SKIP_CHUNK_SIZE))
        except OSError as e:
            raise ReadError(f"Failed to skip {n_bytes} bytes: {e}") from e
        if not data:
            raise UnexpectedEofError(n_bytes, n_bytes - remaining)
        remaining -= len(data)


def read_fixed(stream: BinaryIO, kind: str, count: int = 1) -> tuple:
    """Read ``count`` little-endian values of struct type code ``kind``.

    Example:
        read_fixed(f, "d", 3)  # three float64 values
    """
    fmt = f"<{count}{kind}"
    return struct.unpack(fmt, _read_exact(stream, struct.calcsize(fmt)))


def read_cstring(stream: BinaryIO) -> str:
    """Read a NUL-terminated UTF-8 string."""
    name_bytes = bytearray()
    while True:
        (ch,) = read_fixed(stream, "c")
        if ch == b"\x00":
            break
        name_bytes += ch
    try:
        return name_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidRecordError(f"Invalid UTF-8 string field: {bytes(name_bytes)!r}") from e
