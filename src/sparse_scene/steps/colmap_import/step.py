"""Import step: COLMAP binary export -> in-memory Scene or Dataset."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from sparse_scene.colmap.source import CAMERAS_FILE, IMAGES_FILE, POINTS_FILE, ColmapSource
from sparse_scene.core.contracts import StepMeta
from sparse_scene.core.step_base import BaseStep
from .config import ColmapImportConfig
from .contracts import ColmapImportInput, ColmapImportOutput

logger = logging.getLogger(__name__)


class ColmapImportStep(BaseStep[ColmapImportInput, ColmapImportOutput, ColmapImportConfig]):
    name: ClassVar[str] = "colmap_import"
    input_type: ClassVar = ColmapImportInput
    output_type: ClassVar = ColmapImportOutput
    config_type: ClassVar = ColmapImportConfig

    def resolve_dirs(self, inputs: ColmapImportInput) -> tuple[Path, Path]:
        sparse_dir = inputs.sparse_dir or inputs.source_dir / self.config.sparse_subdir
        images_dir = inputs.images_dir or inputs.source_dir / self.config.images_subdir
        return sparse_dir, images_dir

    def validate_inputs(self, inputs: ColmapImportInput) -> bool:
        sparse_dir, images_dir = self.resolve_dirs(inputs)
        for file_name in (CAMERAS_FILE, IMAGES_FILE, POINTS_FILE):
            if not (sparse_dir / file_name).exists():
                logger.error(f"{file_name} not found in {sparse_dir}")
                return False
        if not images_dir.is_dir():
            logger.error(f"Images directory not found: {images_dir}")
            return False
        return True

    def load_source(self, inputs: ColmapImportInput) -> ColmapSource:
        sparse_dir, images_dir = self.resolve_dirs(inputs)
        return ColmapSource.from_directory(sparse_dir, images_dir)

    def run(self, inputs: ColmapImportInput) -> ColmapImportOutput:
        source = self.load_source(inputs)
        cfg = self.config

        if cfg.target == "dataset":
            result = source.to_dataset(max_workers=cfg.max_workers)
            num_views = len(result.cameras)
        else:
            result = source.to_scene(z_near=cfg.z_near, z_far=cfg.z_far, max_workers=cfg.max_workers)
            num_views = len(result.views)

        return ColmapImportOutput(
            result=result,
            target=cfg.target,
            num_views=num_views,
            num_points=len(result.points),
            meta=StepMeta(
                step_name=self.name,
                params=cfg.model_dump(),
            ),
        )
