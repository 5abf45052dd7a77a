"""Tag codec dispatch and container codecs."""

from .audio_file import AudioFile, find_audio_files
from .codecs import TagCodec
from .dispatcher import TagCodecDispatcher

__all__ = ["AudioFile", "TagCodec", "TagCodecDispatcher", "find_audio_files"]
