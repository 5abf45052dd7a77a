"""Where: src/albumtags/features/manifest/usecases/artwork.py
What: Locate, read and write the cover side-file kept beside the manifest.
Why: Artwork travels outside the manifest text as a loose JPEG/PNG file.
"""

from __future__ import annotations

from pathlib import Path

from albumtags.platform.filesystem import list_files
from albumtags.shared.errors import FileAccessError
from albumtags.shared.image import Image, ImageFormat


def find_artwork_file(directory: Path) -> Path | None:
    """Return the first (by name) JPEG/PNG file in ``directory``."""
    for candidate in list_files(directory):
        if ImageFormat.is_image_file(candidate):
            return candidate
    return None


def load_artwork(directory: Path) -> Image | None:
    """Read the cover side-file of ``directory``, if there is one."""
    artwork_path = find_artwork_file(directory)
    if artwork_path is None:
        return None
    try:
        return Image.from_file(artwork_path)
    except OSError as exc:
        raise FileAccessError(f"cannot read artwork {artwork_path}: {exc}") from exc


def write_artwork_file(artwork: Image | None, directory: Path, basename: str) -> Path | None:
    """Write ``artwork`` as ``<basename>.<ext>`` in ``directory``.

    Returns:
        The written path, or None when there is no artwork.
    """
    if artwork is None:
        return None
    target = directory / f"{basename}.{artwork.format.extension}"
    try:
        _ = target.write_bytes(artwork.data)
    except OSError as exc:
        raise FileAccessError(f"cannot write artwork {target}: {exc}") from exc
    return target


__all__ = ["find_artwork_file", "load_artwork", "write_artwork_file"]
