"""Shared container logic for decoded COLMAP records."""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Callable, ClassVar

from sparse_scene.core.errors import DuplicateIdError
from .cursor import read_fixed

logger = logging.getLogger(__name__)


def read_record_count(stream: BinaryIO) -> int:
    """Read the u64 record count that heads every COLMAP container file."""
    return read_fixed(stream, "Q")[0]


class KeyedRecords(dict):
    """Id-keyed record container that rejects duplicate ids.

    Subclasses set ``kind`` (used in error messages), ``decode_record``
    and ``record_key``.
    """

    kind: ClassVar[str] = "record"
    decode_record: ClassVar[Callable[[BinaryIO], Any]]
    record_key: ClassVar[Callable[[Any], int]]

    def insert(self, record: Any) -> None:
        key = type(self).record_key(record)
        if key in self:
            raise DuplicateIdError(self.kind, key)
        self[key] = record

    @classmethod
    def decode(cls, stream: BinaryIO):
        """Decode a count-prefixed sequence of records into a new container."""
        records = cls()
        count = read_record_count(stream)
        for _ in range(count):
            records.insert(cls.decode_record(stream))
        logger.debug(f"Decoded {len(records)} {cls.kind} records")
        return records
