"""MP4/M4A atom codec."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Final

from typing_extensions import override

from mutagen.mp4 import MP4, MP4Cover

from albumtags.shared.errors import ImageFormatError, TagAccessError
from albumtags.shared.image import Image, ImageFormat
from albumtags.shared.tag_record import TagRecord

from ._base import MutagenTagCodec
from ._tag_utils import first_text, parse_tuple_numbers

# disk/trkn atoms hold unsigned 16-bit integers
_MAX_ATOM_NUMBER: Final[int] = 0xFFFF

_COVER_FORMATS: Final[dict[int, ImageFormat]] = {
    MP4Cover.FORMAT_JPEG: ImageFormat.JPEG,
    MP4Cover.FORMAT_PNG: ImageFormat.PNG,
}


def _to_image(cover: MP4Cover) -> Image:
    image_format = _COVER_FORMATS.get(cover.imageformat)
    if image_format is None:
        raise ImageFormatError(f"unsupported MP4 cover format: {cover.imageformat}")
    return Image(format=image_format, data=bytes(cover))


def _to_cover(image: Image) -> MP4Cover:
    imageformat = MP4Cover.FORMAT_JPEG if image.format is ImageFormat.JPEG else MP4Cover.FORMAT_PNG
    return MP4Cover(image.data, imageformat=imageformat)


class Mp4TagCodec(MutagenTagCodec):
    """Codec for M4A files."""

    name: ClassVar[str] = "MP4"
    FILE_CLASS: ClassVar[type | None] = MP4

    TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "album": "\xa9alb",
        "album_artist": "aART",
        "release_date": "\xa9day",
        "title": "\xa9nam",
    }

    @override
    def load(self, path: Path) -> TagRecord:
        audio = self._open_file(path)
        record = TagRecord()

        tags = audio.tags
        if tags is None:
            return record

        for attr, key in self.TEXT_FIELDS.items():
            setattr(record, attr, first_text(tags.get(key)))
        record.disc_number, record.disc_total = parse_tuple_numbers(tags.get("disk"))
        record.track_number, record.track_total = parse_tuple_numbers(tags.get("trkn"))
        record.artists = [str(artist) for artist in tags.get("\xa9ART") or []]

        covers = tags.get("covr")
        if covers:
            record.artwork = _to_image(covers[0])

        return record

    @override
    def save(self, path: Path, record: TagRecord) -> None:
        audio = self._open_file(path)

        if audio.tags is None:
            audio.add_tags()
        else:
            audio.tags.clear()

        for attr, key in self.TEXT_FIELDS.items():
            value: str | None = getattr(record, attr)
            if value is not None:
                audio.tags[key] = [value]

        disk = self._number_pair(path, record.disc_number, record.disc_total)
        if disk is not None:
            audio.tags["disk"] = [disk]
        trkn = self._number_pair(path, record.track_number, record.track_total)
        if trkn is not None:
            audio.tags["trkn"] = [trkn]

        if record.artists:
            audio.tags["\xa9ART"] = list(record.artists)
        if record.artwork is not None:
            audio.tags["covr"] = [_to_cover(record.artwork)]

        self._save_file(audio, path)

    @staticmethod
    def _number_pair(path: Path, number: int | None, total: int | None) -> tuple[int, int] | None:
        """Build a ``(number, total)`` atom value, using 0 for unknown parts."""
        if number is None and total is None:
            return None
        pair = (number or 0, total or 0)
        if any(value < 0 or value > _MAX_ATOM_NUMBER for value in pair):
            raise TagAccessError(path, f"number out of 16-bit range: {pair}")
        return pair


__all__ = ["Mp4TagCodec"]
