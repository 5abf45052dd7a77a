"""Manifest serialization."""

from __future__ import annotations

import unicodedata
from pathlib import Path

from albumtags.features.album import Album
from albumtags.shared.errors import FileAccessError

from .reader import ARTIST_SEPARATOR


def render_manifest(album: Album) -> str:
    """Render ``album`` as NFC-normalized manifest text.

    Discs without tracks are left out so the output always parses back.
    """
    lines: list[str] = [
        album.title or "",
        album.artist or "",
        album.release_date or "",
        "",
    ]
    discs = [disc for disc in album.discs if disc.tracks]
    for index, disc in enumerate(discs):
        if index:
            lines.append("")
        for track in disc.tracks:
            lines.append(ARTIST_SEPARATOR.join([track.title or "", *track.artists]))

    return unicodedata.normalize("NFC", "\n".join(lines) + "\n")


def write_manifest(path: Path, album: Album) -> None:
    """Write the manifest for ``album`` to ``path`` as UTF-8.

    Raises:
        FileAccessError: If the file cannot be written.
    """
    try:
        _ = path.write_text(render_manifest(album), encoding="utf-8", newline="\n")
    except OSError as exc:
        raise FileAccessError(f"cannot write manifest file {path}: {exc}") from exc


__all__ = ["render_manifest", "write_manifest"]
