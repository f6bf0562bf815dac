"""Configuration for the COLMAP import step."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class ColmapImportConfig(BaseModel):
    target: Literal["scene", "dataset"] = Field(
        "scene", description="Output shape: scene (render) | dataset (training)"
    )
    max_workers: int | None = Field(
        None, ge=1, description="Assembly worker threads (None = executor default)"
    )
    z_near: float = Field(0.01, gt=0, description="Near clipping depth for scene projections")
    z_far: float = Field(100.0, gt=0, description="Far clipping depth for scene projections")
    sparse_subdir: str = Field("sparse/0", description="cameras/images/points3D.bin location")
    images_subdir: str = Field("images", description="Encoded image directory")

    @model_validator(mode="after")
    def _check_depth_range(self):
        if self.z_near >= self.z_far:
            raise ValueError(f"z_near ({self.z_near}) must be less than z_far ({self.z_far})")
        return self
