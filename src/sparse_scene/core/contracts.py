"""Common Pydantic models shared across the import step and the CLI."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class StepMeta(BaseModel):
    """Metadata attached to every step output for reproducibility."""

    step_name: str
    elapsed_seconds: float = 0.0
    params: dict[str, Any] = Field(default_factory=dict)


class CameraSummary(BaseModel):
    """One decoded camera, as reported by ``inspect``."""

    camera_id: int
    model: str
    width: int
    height: int
    params: list[float] = Field(default_factory=list)


class SourceSummary(BaseModel):
    """Record counts of a decoded COLMAP export."""

    num_cameras: int
    num_images: int
    num_points: int
    num_image_files: int
    cameras: list[CameraSummary] = Field(default_factory=list)
