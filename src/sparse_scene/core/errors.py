"""Error taxonomy for COLMAP import and scene assembly.

Every error is fatal for the import that raised it. Errors carry the
offending id or name so a defective dataset can be diagnosed.
"""

from __future__ import annotations


class ColmapError(Exception):
    """Base class for all import errors."""


# ── Decoding ─────────────────────────────────────────────────────────

class DecodeError(ColmapError):
    """A record could not be decoded from the byte stream."""


class UnexpectedEofError(DecodeError):
    """The stream ended before the requested number of bytes was read."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Unexpected end of stream: expected {expected} bytes, got {actual}")


class ReadError(DecodeError):
    """The underlying byte source failed while reading."""


class UnsupportedCameraModelError(DecodeError):
    """A camera record uses a model id outside the COLMAP model table."""

    def __init__(self, model_id: int):
        self.model_id = model_id
        super().__init__(f"Unsupported camera model id: {model_id}")


class InvalidRecordError(DecodeError):
    """A record decoded cleanly but violates a field invariant."""


class DuplicateIdError(ColmapError):
    """Two records of the same kind share an id."""

    def __init__(self, kind: str, record_id: int):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Duplicate {kind} id: {record_id}")


# ── Assembly ─────────────────────────────────────────────────────────

class UnknownCameraIdError(ColmapError):
    """An image references a camera id that is not in the cameras collection."""

    def __init__(self, camera_id: int):
        self.camera_id = camera_id
        super().__init__(f"No such camera id: {camera_id}")


class UnknownFileNameError(ColmapError):
    """An image file name is unregistered or was already consumed."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"No such image file name: {file_name!r}")


class UnimplementedError(ColmapError):
    """The resolved camera model cannot be projected."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Camera model {model} is not implemented")


class ImageCodecError(ColmapError):
    """The image codec failed to decode an encoded buffer."""
