"""
Summary: Build ``[disc.]track.title.ext`` file names from a file's own tags.
Why: Keep naming rules pure so they can be tested without touching disk.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import ClassVar, TypeVar, final

from albumtags.shared.errors import MissingTagError
from albumtags.shared.tag_record import TagRecord


_T = TypeVar("_T")


def zero_pad(number: int, count: int) -> str:
    """Pad ``number`` with zeros to the digit width of ``count``."""
    return str(number).zfill(len(str(count)))


@final
class FileNamePlanner:
    """Generate file names from tag records."""

    # Characters rejected by common filesystems; removed, not replaced.
    UNSAFE_CHARACTERS: ClassVar[re.Pattern[str]] = re.compile(r'[*\\|:"<>/?]')

    @staticmethod
    def _require(value: _T | None, path: Path, field_name: str) -> _T:
        if value is None:
            raise MissingTagError(path, field_name)
        return value

    @classmethod
    def plan(cls, record: TagRecord, path: Path) -> str:
        """Return the new file name for the file at ``path``.

        The disc segment is only emitted for albums with more than one disc.

        Raises:
            MissingTagError: If disc or track numbering or the title is absent.
        """
        disc_total = cls._require(record.disc_total, path, "disc total")
        disc_number = cls._require(record.disc_number, path, "disc number")
        track_total = cls._require(record.track_total, path, "track total")
        track_number = cls._require(record.track_number, path, "track number")
        title = cls._require(record.title, path, "title")

        filename = ""
        if disc_total > 1:
            filename += f"{zero_pad(disc_number, disc_total)}."
        filename += f"{zero_pad(track_number, track_total)}.{title}"
        if path.suffix:
            filename += path.suffix

        return cls.UNSAFE_CHARACTERS.sub("", filename)


__all__ = ["FileNamePlanner", "zero_pad"]
