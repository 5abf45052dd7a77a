"""Manifest parsing.

Where: src/albumtags/features/manifest/usecases/reader.py
What: Turn manifest text into an ``Album`` and attach the folder's cover image.
Why: The grammar is line oriented and aborts on the first malformed line.

Grammar::

    line 1   album title
    line 2   album artist
    line 3   release date (YYYY-MM-DD)
    line 4   blank
    line 5.. disc blocks separated by one blank line; each track line is
             ``title ("//" artist)*``
"""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path
from typing import Final, final

from albumtags.features.album import Album, Disc
from albumtags.platform.logging import logger
from albumtags.shared.errors import FileAccessError, ManifestSyntaxError

from .artwork import load_artwork

__all__ = ["load_manifest", "parse_manifest", "parse_track_line", "read_manifest_text"]

RELEASE_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
ARTIST_SEPARATOR: Final[str] = "//"


@final
class _LineScanner:
    """Hand out manifest lines one at a time, tracking the line number."""

    def __init__(self, text: str) -> None:
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self._lines: list[str] = [line.removesuffix("\r") for line in lines]
        self._position: int = 0

    @property
    def line_number(self) -> int:
        """1-based number of the line most recently returned."""
        return self._position

    def next_line(self) -> str | None:
        if self._position >= len(self._lines):
            return None
        line = self._lines[self._position]
        self._position += 1
        return line

    def require(self, missing_message: str) -> str:
        """Return the next line stripped, or fail with ``missing_message``."""
        line = self.next_line()
        if line is None:
            raise ManifestSyntaxError(missing_message, self._position + 1)
        return line.strip()

    def fail(self, message: str) -> ManifestSyntaxError:
        return ManifestSyntaxError(message, self.line_number)


def parse_track_line(line: str) -> tuple[str, list[str]]:
    """Split ``title//artist//artist`` into the title and its artists."""
    title, *artists = line.split(ARTIST_SEPARATOR)
    return title, artists


def parse_manifest(text: str) -> Album:
    """Parse already-decoded manifest text.

    Raises:
        ManifestSyntaxError: On the first missing or malformed line.
    """
    scanner = _LineScanner(unicodedata.normalize("NFC", text))

    title = scanner.require("missing album name")
    artist = scanner.require("missing album artist")
    release_date = scanner.require("missing release date")
    if not RELEASE_DATE_PATTERN.match(release_date):
        raise scanner.fail(f"release date must be YYYY-MM-DD: {release_date!r}")
    if scanner.require("missing blank line after the release date"):
        raise scanner.fail("line after the release date must be blank")

    album = Album(title=title, artist=artist, release_date=release_date)

    # A blank line closes the current disc; the next disc opens on its first track.
    disc: Disc | None = album.new_disc()
    while (line := scanner.next_line()) is not None:
        line = line.rstrip()
        if not line:
            if disc is None or not disc.tracks:
                raise scanner.fail("consecutive blank lines")
            disc = None
            continue
        if disc is None:
            # Discs open on their first track; a trailing blank line adds no empty disc.
            disc = album.new_disc()
        track_title, artists = parse_track_line(line)
        _ = disc.new_track(track_title, artists)

    return album


def read_manifest_text(path: Path) -> str:
    """Read and NFC-normalize the manifest file.

    Raises:
        FileAccessError: If the file cannot be read or is not UTF-8.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileAccessError(f"cannot read manifest file {path}: {exc}") from exc
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FileAccessError(f"manifest file {path} is not valid UTF-8") from exc
    return unicodedata.normalize("NFC", text)


def load_manifest(path: Path) -> Album:
    """Load the manifest at ``path`` and attach the cover image found beside it."""
    album = parse_manifest(read_manifest_text(path))
    album.artwork = load_artwork(path.parent)
    logger.debug(
        "Loaded manifest %s: %d disc(s), %d track(s), artwork=%s",
        path,
        len(album.discs),
        album.track_count,
        album.artwork,
    )
    return album
