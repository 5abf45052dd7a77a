"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path

from albumtags.shared.errors import FileAccessError


def list_files(directory: Path) -> list[Path]:
    """Return the regular files directly inside ``directory`` sorted by name.

    Raises:
        FileAccessError: If the directory cannot be listed.
    """

    try:
        entries = [entry for entry in directory.iterdir() if entry.is_file()]
    except OSError as exc:
        raise FileAccessError(f"cannot list files in {directory}: {exc}") from exc

    return sorted(entries, key=lambda entry: entry.name)


__all__ = ["list_files"]
