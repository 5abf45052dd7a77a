"""Where: albumtags.shared.errors
What: Closed error taxonomy raised by the core and reported by the flows.
Why: Every failure carries both a machine-readable kind and a specific message.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import ClassVar


class ErrorKind(StrEnum):
    """Categories of fatal failures."""

    MANIFEST_SYNTAX = "manifest_syntax"
    COUNT_MISMATCH = "count_mismatch"
    EMPTY_INPUT = "empty_input"
    IMAGE_FORMAT = "image_format"
    FILESYSTEM = "filesystem"
    CODEC_CAPABILITY = "codec_capability"
    MISSING_TAG = "missing_tag"


class AlbumTagsError(Exception):
    """Base class for all albumtags failures."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class ManifestSyntaxError(AlbumTagsError):
    """The manifest text is missing a line or contains a malformed one."""

    kind = ErrorKind.MANIFEST_SYNTAX

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number: int | None = line_number


class TrackCountMismatchError(AlbumTagsError):
    """Number of manifest tracks differs from the number of audio files."""

    kind = ErrorKind.COUNT_MISMATCH

    def __init__(self, tracks: int | None = None, files: int | None = None) -> None:
        message = "number of audio files does not match the number of titles in the manifest"
        if tracks is not None and files is not None:
            message = f"{message} (titles={tracks}, files={files})"
        super().__init__(message)


class NoAudioFilesError(AlbumTagsError):
    """There is nothing to process."""

    kind = ErrorKind.EMPTY_INPUT


class ImageFormatError(AlbumTagsError):
    """Image data or file is not a JPEG or PNG."""

    kind = ErrorKind.IMAGE_FORMAT

    def __init__(self, message: str = "image is neither JPEG nor PNG") -> None:
        super().__init__(message)


class FileAccessError(AlbumTagsError):
    """Reading, writing, listing or renaming on the filesystem failed."""

    kind = ErrorKind.FILESYSTEM


class TagAccessError(FileAccessError):
    """A tag library failed to read or write a file."""

    def __init__(self, path: Path, cause: BaseException | str) -> None:
        super().__init__(f"cannot access tags of {path}: {cause}")
        self.path: Path = path


class CodecCapabilityError(AlbumTagsError):
    """A supported container cannot perform the requested operation."""

    kind = ErrorKind.CODEC_CAPABILITY


class MissingTagError(AlbumTagsError):
    """A file lacks a tag that the operation requires."""

    kind = ErrorKind.MISSING_TAG

    def __init__(self, path: Path, field_name: str) -> None:
        super().__init__(f"{path.name} has no {field_name} tag")
        self.path: Path = path
        self.field_name: str = field_name


__all__ = [
    "AlbumTagsError",
    "CodecCapabilityError",
    "ErrorKind",
    "FileAccessError",
    "ImageFormatError",
    "ManifestSyntaxError",
    "MissingTagError",
    "NoAudioFilesError",
    "TagAccessError",
    "TrackCountMismatchError",
]
