"""Where: albumtags.features.album.domain.models
What: Album -> Disc -> Track hierarchy with positional (1-based) numbering.
Why: Represent a manifest independently of its text or tag-embedded forms.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from albumtags.shared.image import Image


@dataclass
class Track:
    """One manifest entry."""

    title: str | None = None
    artists: list[str] = field(default_factory=list)


@dataclass
class Disc:
    """Ordered tracks of one disc. Tracks are only ever appended."""

    tracks: list[Track] = field(default_factory=list)

    def new_track(self, title: str | None, artists: list[str] | None = None) -> Track:
        """Append a track and return it."""
        track = Track(title=title, artists=list(artists or []))
        self.tracks.append(track)
        return track

    def __len__(self) -> int:
        return len(self.tracks)


@dataclass
class Album:
    """Album-level fields plus its discs in order."""

    title: str | None = None
    artist: str | None = None
    release_date: str | None = None
    artwork: Image | None = None
    discs: list[Disc] = field(default_factory=list)

    def new_disc(self) -> Disc:
        """Append an empty disc and return it."""
        disc = Disc()
        self.discs.append(disc)
        return disc

    @property
    def track_count(self) -> int:
        """Total number of tracks across all discs."""
        return sum(len(disc) for disc in self.discs)

    def numbered_tracks(self) -> Iterator[tuple[int, Disc, int, Track]]:
        """Yield ``(disc_number, disc, track_number, track)`` in album order."""
        for disc_number, disc in enumerate(self.discs, start=1):
            for track_number, track in enumerate(disc.tracks, start=1):
                yield disc_number, disc, track_number, track


__all__ = ["Album", "Disc", "Track"]
