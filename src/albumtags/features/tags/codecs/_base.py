"""Shared base classes for tag codecs.

Where: src/albumtags/features/tags/codecs/_base.py
What: Define the load/save capability interface and the mutagen file plumbing.
Why: Each container codec only has to describe its field mapping.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar

from mutagen import FileType, MutagenError

from albumtags.platform.logging import logger
from albumtags.shared.errors import TagAccessError
from albumtags.shared.tag_record import TagRecord

__all__ = ["MutagenTagCodec", "TagCodec"]


class TagCodec(abc.ABC):
    """Read and write a ``TagRecord`` for one container format."""

    name: ClassVar[str] = ""

    @abc.abstractmethod
    def load(self, path: Path) -> TagRecord:
        """Read the normalized tags of ``path``."""
        raise NotImplementedError

    @abc.abstractmethod
    def save(self, path: Path, record: TagRecord) -> None:
        """Replace the tags of ``path`` with ``record``."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class MutagenTagCodec(TagCodec, abc.ABC):
    """Base class for codecs backed by a mutagen ``FileType``."""

    FILE_CLASS: ClassVar[type[FileType] | None] = None

    def _open_file(self, path: Path) -> Any:
        """Open ``path`` with the codec's mutagen class."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        try:
            audio = self.FILE_CLASS(path)
        except (MutagenError, OSError) as exc:
            logger.error("Failed to read %s tags from %s: %s", self.name, path, exc)
            raise TagAccessError(path, exc) from exc
        logger.debug("Opened %s with tags type: %s", path, type(audio.tags).__name__)
        return audio

    def _save_file(self, audio: Any, path: Path) -> None:
        """Persist a modified mutagen file object."""
        try:
            audio.save()
        except (MutagenError, OSError) as exc:
            logger.error("Failed to write %s tags to %s: %s", self.name, path, exc)
            raise TagAccessError(path, exc) from exc
        logger.debug("Saved %s tags to %s", self.name, path)
