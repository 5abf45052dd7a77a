"""
Summary: Value objects and errors shared across albumtags features.
Why: Keep codecs, the manifest and the flows speaking one vocabulary.
"""

from .errors import (
    AlbumTagsError,
    CodecCapabilityError,
    ErrorKind,
    FileAccessError,
    ImageFormatError,
    ManifestSyntaxError,
    MissingTagError,
    NoAudioFilesError,
    TagAccessError,
    TrackCountMismatchError,
)
from .image import Image, ImageFormat
from .tag_record import TagRecord

__all__ = [
    "AlbumTagsError",
    "CodecCapabilityError",
    "ErrorKind",
    "FileAccessError",
    "Image",
    "ImageFormat",
    "ImageFormatError",
    "ManifestSyntaxError",
    "MissingTagError",
    "NoAudioFilesError",
    "TagAccessError",
    "TagRecord",
    "TrackCountMismatchError",
]
