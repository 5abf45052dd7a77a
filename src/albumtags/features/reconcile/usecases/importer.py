"""Where: src/albumtags/features/reconcile/usecases/importer.py
What: Write manifest data into the tags of a filename-sorted list of files.
Why: Tracks and files are paired purely by position; counts must agree.
"""

from __future__ import annotations

from collections.abc import Sequence

from albumtags.features.album import Album, Disc, Track
from albumtags.features.tags import AudioFile
from albumtags.platform.logging import FlowEvent, logger
from albumtags.shared.errors import TrackCountMismatchError
from albumtags.shared.tag_record import TagRecord


def compose_record(
    album: Album,
    disc_number: int,
    disc: Disc,
    track_number: int,
    track: Track,
) -> TagRecord:
    """Build the full tag record for one track position."""
    return TagRecord(
        album=album.title,
        album_artist=album.artist,
        release_date=album.release_date,
        artwork=album.artwork,
        disc_total=len(album.discs),
        disc_number=disc_number,
        track_total=len(disc),
        track_number=track_number,
        title=track.title,
        artists=list(track.artists),
    )


def apply_album(audio_files: Sequence[AudioFile], album: Album) -> int:
    """Save one tag record per track onto the matching file.

    Files saved before a count mismatch is detected stay modified.

    Returns:
        Number of files tagged.

    Raises:
        TrackCountMismatchError: If the album has more or fewer tracks than files.
    """
    total_tracks = album.track_count
    total_files = len(audio_files)
    remaining = iter(audio_files)
    tagged = 0

    for disc_number, disc, track_number, track in album.numbered_tracks():
        audio_file = next(remaining, None)
        if audio_file is None:
            raise TrackCountMismatchError(total_tracks, total_files)

        audio_file.save_tags(compose_record(album, disc_number, disc, track_number, track))
        tagged += 1
        logger.info(
            "Tagged %s",
            audio_file.path,
            extra={
                "flow_event": FlowEvent.FILE_TAGGED,
                "sequence": tagged,
                "total_files": total_files,
                "source_path": audio_file.path,
                "base_path": audio_file.path.parent,
                "title": track.title,
            },
        )

    if next(remaining, None) is not None:
        raise TrackCountMismatchError(total_tracks, total_files)

    return tagged


__all__ = ["apply_album", "compose_record"]
