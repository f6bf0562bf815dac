"""sparse-scene core: base step, shared contracts, errors, config and logging."""

from .step_base import BaseStep
from .contracts import CameraSummary, SourceSummary, StepMeta
from .config import load_config
from .errors import (
    ColmapError,
    DecodeError,
    DuplicateIdError,
    ImageCodecError,
    InvalidRecordError,
    ReadError,
    UnexpectedEofError,
    UnimplementedError,
    UnknownCameraIdError,
    UnknownFileNameError,
    UnsupportedCameraModelError,
)
from .logging import setup_logging

__all__ = [
    "BaseStep",
    "CameraSummary",
    "SourceSummary",
    "StepMeta",
    "load_config",
    "ColmapError",
    "DecodeError",
    "DuplicateIdError",
    "ImageCodecError",
    "InvalidRecordError",
    "ReadError",
    "UnexpectedEofError",
    "UnimplementedError",
    "UnknownCameraIdError",
    "UnknownFileNameError",
    "UnsupportedCameraModelError",
    "setup_logging",
]
