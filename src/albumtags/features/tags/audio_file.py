"""Where: albumtags.features.tags.audio_file
What: Bind a file path to the codec chosen for it and list a folder's audio files.
Why: Reconciliation trusts the filename order of this list for positional matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from albumtags.platform.filesystem import list_files
from albumtags.platform.logging import logger
from albumtags.shared.tag_record import TagRecord

from .codecs import TagCodec
from .dispatcher import TagCodecDispatcher


@dataclass
class AudioFile:
    """An audio file together with the codec used to access its tags."""

    path: Path
    codec: TagCodec

    def load_tags(self) -> TagRecord:
        """Read this file's normalized tags."""
        return self.codec.load(self.path)

    def save_tags(self, record: TagRecord) -> None:
        """Replace this file's tags with ``record``."""
        self.codec.save(self.path, record)


def find_audio_files(directory: Path) -> list[AudioFile]:
    """List the supported audio files in ``directory`` sorted by file name.

    Files with an unsupported or missing extension are skipped silently.
    """
    audio_files: list[AudioFile] = []
    for path in list_files(directory):
        codec = TagCodecDispatcher.codec_for(path)
        if codec is None:
            logger.debug("Skipping unsupported file %s", path)
            continue
        audio_files.append(AudioFile(path=path, codec=codec))
    return audio_files


__all__ = ["AudioFile", "find_audio_files"]
