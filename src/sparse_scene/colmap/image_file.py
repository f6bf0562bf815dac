"""Registry of encoded image files, each consumed exactly once.

The registry is an arena: the name -> entry mapping is not mutated while
assembly runs, and each entry carries its own lock, so workers taking
different files never contend. Taking an entry twice fails with
``UnknownFileNameError``, the same error as an unregistered name.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import BinaryIO, Iterable, Union

from sparse_scene.core.errors import ReadError, UnknownFileNameError

logger = logging.getLogger(__name__)

ByteSource = Union[BinaryIO, Path]


class ImageFile:
    """One encoded image: a seekable byte stream or a path opened on demand."""

    def __init__(self, name: str, source: ByteSource):
        self.name = name
        self._source: ByteSource | None = source
        self._lock = threading.Lock()

    @property
    def taken(self) -> bool:
        return self._source is None

    def take(self) -> bytes:
        """Read the full encoded buffer and release the source."""
        with self._lock:
            source = self._source
            if source is None:
                raise UnknownFileNameError(self.name)
            self._source = None

        try:
            if isinstance(source, Path):
                return source.read_bytes()
            source.seek(0)
            return source.read()
        except OSError as e:
            raise ReadError(f"Failed to read image file {self.name!r}: {e}") from e

    def __repr__(self) -> str:
        return f"ImageFile(name={self.name!r}, taken={self.taken})"


class ImageFiles:
    """file name -> ImageFile."""

    def __init__(self, files: Iterable[ImageFile] = ()):
        self._entries: dict[str, ImageFile] = {}
        for image_file in files:
            self._add(image_file)

    def _add(self, image_file: ImageFile) -> None:
        if image_file.name in self._entries:
            raise ValueError(f"Image file registered twice: {image_file.name!r}")
        self._entries[image_file.name] = image_file

    def register(self, name: str, source: ByteSource) -> None:
        self._add(ImageFile(name, source))

    @classmethod
    def from_sources(cls, sources: dict[str, ByteSource]) -> ImageFiles:
        return cls(ImageFile(name, source) for name, source in sources.items())

    @classmethod
    def from_directory(cls, directory: Path, names: Iterable[str] | None = None) -> ImageFiles:
        """Register files of ``directory`` by their path relative to it.

        With ``names``, only those files are registered and missing ones are
        skipped; assembly reports them as unknown file names.
        """
        directory = Path(directory)
        if names is None:
            paths = sorted(p for p in directory.rglob("*") if p.is_file())
        else:
            paths = [directory / name for name in dict.fromkeys(names)]
            missing = [p for p in paths if not p.is_file()]
            if missing:
                logger.warning(f"{len(missing)} referenced image files not found in {directory}")
            paths = [p for p in paths if p.is_file()]

        files = cls(ImageFile(p.relative_to(directory).as_posix(), p) for p in paths)
        logger.info(f"Registered {len(files)} image files from {directory}")
        return files

    def take(self, name: str) -> bytes:
        """Consume the entry for ``name`` and return its encoded bytes."""
        image_file = self._entries.get(name)
        if image_file is None:
            raise UnknownFileNameError(name)
        return image_file.take()

    def names(self) -> list[str]:
        return list(self._entries)

    def available(self) -> list[str]:
        """Names that have not been consumed yet."""
        return [name for name, entry in self._entries.items() if not entry.taken]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
