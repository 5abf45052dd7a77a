"""FLAC (Vorbis comment) codec."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from typing_extensions import override

from mutagen.flac import FLAC, Picture
from mutagen.id3 import PictureType

from albumtags.shared.image import Image
from albumtags.shared.tag_record import TagRecord

from ._base import MutagenTagCodec
from ._tag_utils import first_text, parse_number, parse_slash_separated


class FlacTagCodec(MutagenTagCodec):
    """Codec for FLAC files."""

    name: ClassVar[str] = "FLAC"
    FILE_CLASS: ClassVar[type | None] = FLAC

    TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "album": "ALBUM",
        "album_artist": "ALBUMARTIST",
        "release_date": "DATE",
        "title": "TITLE",
    }
    NUMBER_FIELDS: ClassVar[dict[str, str]] = {
        "disc_total": "DISCTOTAL",
        "disc_number": "DISCNUMBER",
        "track_total": "TRACKTOTAL",
        "track_number": "TRACKNUMBER",
    }

    @override
    def load(self, path: Path) -> TagRecord:
        audio = self._open_file(path)
        record = TagRecord()

        tags = audio.tags
        if tags is not None:
            for attr, key in self.TEXT_FIELDS.items():
                setattr(record, attr, first_text(tags.get(key)))

            # DISCNUMBER/TRACKNUMBER may carry the total as "n/total"
            disc_number, disc_total = parse_slash_separated(first_text(tags.get("DISCNUMBER")) or "")
            track_number, track_total = parse_slash_separated(first_text(tags.get("TRACKNUMBER")) or "")
            explicit_disc_total = parse_number(first_text(tags.get("DISCTOTAL")))
            explicit_track_total = parse_number(first_text(tags.get("TRACKTOTAL")))
            record.disc_number = disc_number
            record.disc_total = explicit_disc_total if explicit_disc_total is not None else disc_total
            record.track_number = track_number
            record.track_total = explicit_track_total if explicit_track_total is not None else track_total

            record.artists = [str(artist) for artist in tags.get("ARTIST") or []]

        for picture in audio.pictures:
            if picture.type == PictureType.COVER_FRONT:
                record.artwork = Image.from_bytes(picture.data)
                break

        return record

    @override
    def save(self, path: Path, record: TagRecord) -> None:
        audio = self._open_file(path)

        if audio.tags is None:
            audio.add_tags()
        else:
            audio.tags.clear()
        audio.clear_pictures()

        for attr, key in self.TEXT_FIELDS.items():
            value: str | None = getattr(record, attr)
            if value is not None:
                audio.tags[key] = [value]
        for attr, key in self.NUMBER_FIELDS.items():
            number: int | None = getattr(record, attr)
            if number is not None:
                audio.tags[key] = [str(number)]
        if record.artists:
            audio.tags["ARTIST"] = list(record.artists)

        if record.artwork is not None:
            picture = Picture()
            picture.type = PictureType.COVER_FRONT
            picture.mime = record.artwork.format.mime
            picture.desc = ""
            picture.data = record.artwork.data
            audio.add_picture(picture)

        self._save_file(audio, path)


__all__ = ["FlacTagCodec"]
