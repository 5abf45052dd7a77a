"""ID3v2 codec for MP3 files plus the ID3 mapping shared with DSF."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from typing_extensions import override

from mutagen import MutagenError
from mutagen.id3 import (
    APIC,
    ID3,
    TALB,
    TDRL,
    TIT2,
    TPE1,
    TPE2,
    TPOS,
    TRCK,
    Encoding,
    ID3NoHeaderError,
    PictureType,
)

from albumtags.platform.logging import logger
from albumtags.shared.errors import TagAccessError
from albumtags.shared.image import Image
from albumtags.shared.tag_record import TagRecord

from ._base import TagCodec
from ._tag_utils import (
    ARTIST_JOIN_DELIMITER,
    format_number_pair,
    format_release_date,
    parse_slash_separated,
    split_artists,
)

__all__ = ["Id3TagCodec", "read_id3"]


def _frame_text(tags: ID3, key: str) -> str | None:
    frame = tags.get(key)
    if frame is None or not frame.text:
        return None
    return str(frame.text[0])


def read_id3(tags: ID3) -> TagRecord:
    """Map an ID3 tag onto a ``TagRecord``."""
    record = TagRecord(
        album=_frame_text(tags, "TALB"),
        album_artist=_frame_text(tags, "TPE2"),
        title=_frame_text(tags, "TIT2"),
    )

    released = tags.get("TDRL")
    if released is not None and released.text:
        stamp = released.text[0]
        record.release_date = format_release_date(stamp.year, stamp.month, stamp.day)

    record.disc_number, record.disc_total = parse_slash_separated(_frame_text(tags, "TPOS") or "")
    record.track_number, record.track_total = parse_slash_separated(_frame_text(tags, "TRCK") or "")

    artists = tags.get("TPE1")
    if artists is not None:
        record.artists = split_artists(str(text) for text in artists.text)

    for picture in tags.getall("APIC"):
        if picture.type == PictureType.COVER_FRONT:
            record.artwork = Image.from_bytes(picture.data)
            break

    return record


def build_id3(record: TagRecord) -> ID3:
    """Build a fresh ID3 tag holding exactly the fields of ``record``."""
    tags = ID3()
    utf8 = Encoding.UTF8

    if record.album is not None:
        tags.add(TALB(encoding=utf8, text=[record.album]))
    if record.album_artist is not None:
        tags.add(TPE2(encoding=utf8, text=[record.album_artist]))
    if record.release_date is not None:
        tags.add(TDRL(encoding=utf8, text=[record.release_date]))

    disc = format_number_pair(record.disc_number, record.disc_total)
    if disc is not None:
        tags.add(TPOS(encoding=utf8, text=[disc]))
    track = format_number_pair(record.track_number, record.track_total)
    if track is not None:
        tags.add(TRCK(encoding=utf8, text=[track]))

    if record.title is not None:
        tags.add(TIT2(encoding=utf8, text=[record.title]))
    if record.artists:
        tags.add(TPE1(encoding=utf8, text=[ARTIST_JOIN_DELIMITER.join(record.artists)]))

    if record.artwork is not None:
        tags.add(
            APIC(
                encoding=utf8,
                mime=record.artwork.format.mime,
                type=PictureType.COVER_FRONT,
                desc="",
                data=record.artwork.data,
            )
        )
    return tags


class Id3TagCodec(TagCodec):
    """Codec for MP3 files carrying ID3v2 tags."""

    name: ClassVar[str] = "ID3"

    @override
    def load(self, path: Path) -> TagRecord:
        try:
            tags = ID3(path)
        except ID3NoHeaderError:
            logger.debug("No ID3 header in %s", path)
            return TagRecord()
        except (MutagenError, OSError) as exc:
            logger.error("Failed to read %s tags from %s: %s", self.name, path, exc)
            raise TagAccessError(path, exc) from exc
        return read_id3(tags)

    @override
    def save(self, path: Path, record: TagRecord) -> None:
        tags = build_id3(record)
        try:
            tags.save(path, v2_version=4)
        except (MutagenError, OSError) as exc:
            logger.error("Failed to write %s tags to %s: %s", self.name, path, exc)
            raise TagAccessError(path, exc) from exc
        logger.debug("Saved %s tags to %s", self.name, path)
