"""Tests for image format detection."""

from pathlib import Path

import pytest

from albumtags.shared.errors import ErrorKind, ImageFormatError
from albumtags.shared.image import Image, ImageFormat

from tests.helpers import JPEG_BYTES, PNG_BYTES


class TestImageFormat:
    """Content sniffing and extension lookup."""

    def test_from_data_detects_jpeg_and_png(self) -> None:
        assert ImageFormat.from_data(JPEG_BYTES) is ImageFormat.JPEG
        assert ImageFormat.from_data(PNG_BYTES) is ImageFormat.PNG

    def test_from_data_rejects_other_content(self) -> None:
        with pytest.raises(ImageFormatError) as excinfo:
            _ = ImageFormat.from_data(b"GIF89a" + b"\x00" * 10)
        assert excinfo.value.kind is ErrorKind.IMAGE_FORMAT

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("cover.jpg", ImageFormat.JPEG),
            ("cover.jpeg", ImageFormat.JPEG),
            ("Cover.JPG", ImageFormat.JPEG),
            ("folder.png", ImageFormat.PNG),
        ],
    )
    def test_from_path(self, name: str, expected: ImageFormat) -> None:
        assert ImageFormat.from_path(Path(name)) is expected

    @pytest.mark.parametrize("name", ["cover.gif", "cover", "cover.webp"])
    def test_from_path_rejects_unknown_extensions(self, name: str) -> None:
        assert not ImageFormat.is_image_file(Path(name))
        with pytest.raises(ImageFormatError):
            _ = ImageFormat.from_path(Path(name))

    def test_mime_and_extension(self) -> None:
        assert ImageFormat.JPEG.mime == "image/jpeg"
        assert ImageFormat.JPEG.extension == "jpg"
        assert ImageFormat.PNG.mime == "image/png"
        assert ImageFormat.PNG.extension == "png"


def test_image_from_file_uses_extension(tmp_path: Path) -> None:
    path = tmp_path / "Folder.png"
    _ = path.write_bytes(PNG_BYTES)

    image = Image.from_file(path)

    assert image.format is ImageFormat.PNG
    assert image.data == PNG_BYTES
    assert "image/png" in repr(image)
