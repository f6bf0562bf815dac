"""Assembly of decoded COLMAP collections into target shapes."""

from .adapters import DatasetAdapter, OutputAdapter, Pose, SceneAdapter
from .pipeline import assemble, assemble_view, convert_points, derive_pose

__all__ = [
    "DatasetAdapter",
    "OutputAdapter",
    "Pose",
    "SceneAdapter",
    "assemble",
    "assemble_view",
    "convert_points",
    "derive_pose",
]
