"""DSF codec (read-only)."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from typing_extensions import override

from mutagen.dsf import DSF

from albumtags.shared.errors import CodecCapabilityError
from albumtags.shared.tag_record import TagRecord

from ._base import MutagenTagCodec
from .id3 import read_id3


class DsfTagCodec(MutagenTagCodec):
    """Codec for DSF files, whose ID3 chunk is read but never rewritten."""

    name: ClassVar[str] = "DSF"
    FILE_CLASS: ClassVar[type | None] = DSF

    @override
    def load(self, path: Path) -> TagRecord:
        audio = self._open_file(path)
        if audio.tags is None:
            return TagRecord()
        return read_id3(audio.tags)

    @override
    def save(self, path: Path, record: TagRecord) -> None:
        raise CodecCapabilityError(f"writing DSF tags is not supported: {path.name}")


__all__ = ["DsfTagCodec"]
