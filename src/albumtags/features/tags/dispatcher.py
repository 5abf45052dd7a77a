"""Where: albumtags.features.tags.dispatcher
What: Select a tag codec from a file's extension.
Why: Files without a matching codec are simply left out of processing.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, final

from .codecs import DsfTagCodec, FlacTagCodec, Id3TagCodec, Mp4TagCodec, TagCodec


@final
class TagCodecDispatcher:
    """Static lookup from file extension to codec instance.

    Extensions are matched exactly and case-sensitively, without the dot.
    """

    _codec_map: ClassVar[dict[str, TagCodec]] = {
        "flac": FlacTagCodec(),
        "mp3": Id3TagCodec(),
        "m4a": Mp4TagCodec(),
        "dsf": DsfTagCodec(),
    }

    SUPPORTED_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(_codec_map)

    @classmethod
    def codec_for(cls, path: Path) -> TagCodec | None:
        """Return the codec for ``path`` or None when its extension is unsupported."""
        suffix = path.suffix
        if not suffix:
            return None
        return cls._codec_map.get(suffix[1:])


__all__ = ["TagCodecDispatcher"]
