"""Test doubles and byte fixtures shared by the test modules."""

from __future__ import annotations

import copy
from pathlib import Path
from typing_extensions import override

from albumtags.features.tags.codecs import TagCodec
from albumtags.shared.tag_record import TagRecord

# fLaC marker + a single (last) STREAMINFO block: 44.1 kHz, stereo, 16 bit, no samples.
FLAC_BYTES: bytes = (
    b"fLaC"
    + b"\x80\x00\x00\x22"
    + b"\x10\x00\x10\x00"
    + b"\x00\x00\x00\x00\x00\x00"
    + b"\x0a\xc4\x42\xf0\x00\x00\x00\x00"
    + b"\x00" * 16
)

PNG_BYTES: bytes = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 17
JPEG_BYTES: bytes = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 16


class MemoryTagCodec(TagCodec):
    """Codec keeping records in a dict keyed by path."""

    def __init__(self) -> None:
        self.records: dict[Path, TagRecord] = {}
        self.saved: list[Path] = []

    @override
    def load(self, path: Path) -> TagRecord:
        return copy.deepcopy(self.records.get(path, TagRecord()))

    @override
    def save(self, path: Path, record: TagRecord) -> None:
        self.records[path] = copy.deepcopy(record)
        self.saved.append(path)
