"""sparse-scene: COLMAP binary sparse reconstructions as in-memory scenes and datasets."""

__version__ = "0.1.0"
