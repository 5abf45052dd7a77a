"""Where: albumtags.shared.image
What: Cover image value object and JPEG/PNG format detection.
Why: Content sniffing and extension lookup must agree on one recognised set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import final

from .errors import ImageFormatError


class ImageFormat(Enum):
    """Supported artwork encodings."""

    JPEG = "image/jpeg"
    PNG = "image/png"

    @property
    def mime(self) -> str:
        """MIME type used when embedding the image."""
        return self.value

    @property
    def extension(self) -> str:
        """File extension (without the dot) used for side files."""
        return "jpg" if self is ImageFormat.JPEG else "png"

    @classmethod
    def from_data(cls, data: bytes) -> ImageFormat:
        """Detect the format from the leading magic number.

        Raises:
            ImageFormatError: If the data is neither JPEG nor PNG.
        """
        for signature, image_format in _SIGNATURES.items():
            if data.startswith(signature):
                return image_format
        raise ImageFormatError("image data is neither JPEG nor PNG")

    @classmethod
    def from_path(cls, path: Path) -> ImageFormat:
        """Detect the format from the file extension (case-insensitive).

        Raises:
            ImageFormatError: If the extension is not a recognised image type.
        """
        image_format = _EXTENSIONS.get(path.suffix.lower())
        if image_format is None:
            raise ImageFormatError(f"not a JPEG or PNG file: {path.name}")
        return image_format

    @classmethod
    def is_image_file(cls, path: Path) -> bool:
        """Return whether ``path`` has a recognised image extension."""
        return path.suffix.lower() in _EXTENSIONS


_SIGNATURES: dict[bytes, ImageFormat] = {
    b"\xff\xd8\xff": ImageFormat.JPEG,
    b"\x89PNG\r\n\x1a\n": ImageFormat.PNG,
}

_EXTENSIONS: dict[str, ImageFormat] = {
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
    ".png": ImageFormat.PNG,
}


@final
@dataclass(frozen=True, slots=True)
class Image:
    """Embedded or side-file artwork."""

    format: ImageFormat
    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> Image:
        """Build an image whose format is sniffed from ``data``."""
        return cls(format=ImageFormat.from_data(data), data=bytes(data))

    @classmethod
    def from_file(cls, path: Path) -> Image:
        """Read an image file whose format is taken from its extension."""
        image_format = ImageFormat.from_path(path)
        return cls(format=image_format, data=path.read_bytes())

    def __repr__(self) -> str:
        return f"<Image mime={self.format.mime!r} size={len(self.data)}>"


__all__ = ["Image", "ImageFormat"]
