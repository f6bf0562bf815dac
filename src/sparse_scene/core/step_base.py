"""Base class for import steps.

A step declares typed Input, Output and Config Pydantic models, so it can be
configured from YAML and its config schema printed by the CLI.
"""

from __future__ import annotations

import time
import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, ClassVar

from pydantic import BaseModel

from .contracts import StepMeta
from .errors import ColmapError

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)
ConfigT = TypeVar("ConfigT", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseStep(ABC, Generic[InputT, OutputT, ConfigT]):
    """Abstract base for steps.

    Subclasses set ``input_type``, ``output_type`` and ``config_type`` and
    implement ``run()`` and ``validate_inputs()``. An output that carries a
    ``meta: StepMeta`` field gets its elapsed time filled in by ``execute()``.
    """

    name: ClassVar[str] = ""
    input_type: ClassVar[type[BaseModel]]
    output_type: ClassVar[type[BaseModel]]
    config_type: ClassVar[type[BaseModel]]

    def __init__(self, config: ConfigT):
        self.config = config

    @abstractmethod
    def run(self, inputs: InputT) -> OutputT:
        ...

    @abstractmethod
    def validate_inputs(self, inputs: InputT) -> bool:
        """Check that all required input artifacts exist."""
        ...

    def execute(self, inputs: InputT) -> OutputT:
        """Validate, run, and time the step."""
        step_name = self.name or self.__class__.__name__

        if not self.validate_inputs(inputs):
            raise ValueError(f"[{step_name}] Input validation failed")

        logger.info(f"[{step_name}] Starting...")
        t0 = time.perf_counter()
        try:
            result = self.run(inputs)
        except ColmapError as e:
            logger.error(f"[{step_name}] Failed: {type(e).__name__}: {e}")
            raise
        elapsed = time.perf_counter() - t0

        meta = getattr(result, "meta", None)
        if isinstance(meta, StepMeta):
            meta.elapsed_seconds = elapsed
        logger.info(f"[{step_name}] Done in {elapsed:.1f}s")
        return result

    @classmethod
    def get_config_schema(cls) -> dict:
        """Return JSON schema for config."""
        return cls.config_type.model_json_schema()
