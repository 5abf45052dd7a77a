"""Where: src/albumtags/features/reconcile/usecases/exporter.py
What: Build an Album from the tags of a filename-sorted list of files.
Why: The first file is authoritative for album fields; every track lands on one disc.
"""

from __future__ import annotations

from collections.abc import Sequence

from albumtags.features.album import Album
from albumtags.features.tags import AudioFile
from albumtags.platform.logging import logger
from albumtags.shared.errors import NoAudioFilesError


def build_album(audio_files: Sequence[AudioFile]) -> Album:
    """Derive an album from file tags.

    Album-level fields come from the first file only and are not compared with
    the other files. Disc numbers found in tags are ignored.

    Raises:
        NoAudioFilesError: If ``audio_files`` is empty.
    """
    if not audio_files:
        raise NoAudioFilesError("no audio files to export")

    album = Album()
    disc = album.new_disc()

    for index, audio_file in enumerate(audio_files):
        record = audio_file.load_tags()
        if index == 0:
            album.title = record.album
            album.artist = record.album_artist
            album.release_date = record.release_date
            album.artwork = record.artwork

        title = record.title if record.title is not None else audio_file.path.stem
        _ = disc.new_track(title, record.artists)
        logger.debug("Exported track %d from %s: %s", index + 1, audio_file.path, title)

    return album


__all__ = ["build_album"]
