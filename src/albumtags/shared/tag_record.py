# Where: albumtags.shared.tag_record
# What: Format-independent tag record exchanged between codecs and the album model.
# Why: Codecs only ever read and write this shape, never the album hierarchy.

from __future__ import annotations

from dataclasses import dataclass, field

from .image import Image


@dataclass
class TagRecord:
    """Normalized tags of one audio file."""

    album: str | None = None
    album_artist: str | None = None
    release_date: str | None = None
    artwork: Image | None = None
    disc_total: int | None = None
    disc_number: int | None = None
    track_total: int | None = None
    track_number: int | None = None
    title: str | None = None
    artists: list[str] = field(default_factory=list)


__all__ = ["TagRecord"]
