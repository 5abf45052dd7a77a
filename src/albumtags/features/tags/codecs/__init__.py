"""
Summary: Container-specific codecs mapping mutagen tags onto TagRecord.
Why: Provide a stable import path for the dispatcher and tests.
"""

from ._base import MutagenTagCodec, TagCodec
from .dsf import DsfTagCodec
from .flac import FlacTagCodec
from .id3 import Id3TagCodec, read_id3
from .mp4 import Mp4TagCodec

__all__ = [
    "DsfTagCodec",
    "FlacTagCodec",
    "Id3TagCodec",
    "Mp4TagCodec",
    "MutagenTagCodec",
    "TagCodec",
    "read_id3",
]
