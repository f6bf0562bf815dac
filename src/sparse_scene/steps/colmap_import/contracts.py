"""I/O contracts for the COLMAP import step."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sparse_scene.core.contracts import StepMeta


class ColmapImportInput(BaseModel):
    source_dir: Path = Field(..., description="COLMAP project root")
    sparse_dir: Path | None = Field(None, description="Override for the sparse model directory")
    images_dir: Path | None = Field(None, description="Override for the image directory")


class ColmapImportOutput(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    result: Any = Field(..., description="Assembled Scene or Dataset")
    target: str = Field(..., description="Output shape that was built")
    num_views: int = Field(..., description="Number of assembled views")
    num_points: int = Field(..., description="Number of sparse points")
    meta: StepMeta
