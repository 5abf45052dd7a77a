"""Shared pytest fixtures: minimal audio files and an in-memory codec."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from albumtags.features.tags import AudioFile
from tests.helpers import FLAC_BYTES, MemoryTagCodec


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point configuration lookup at a file that does not exist."""
    monkeypatch.setenv("ALBUMTAGS_CONFIG", str(tmp_path / "missing-config.toml"))


@pytest.fixture
def make_flac(tmp_path: Path) -> Callable[[str], Path]:
    """Create an empty but valid FLAC file in ``tmp_path``."""

    def _make(name: str) -> Path:
        path = tmp_path / name
        _ = path.write_bytes(FLAC_BYTES)
        return path

    return _make


@pytest.fixture
def memory_codec() -> MemoryTagCodec:
    return MemoryTagCodec()


@pytest.fixture
def make_audio_files(
    tmp_path: Path, memory_codec: MemoryTagCodec
) -> Callable[..., list[AudioFile]]:
    """Create placeholder files bound to the in-memory codec."""

    def _make(*names: str) -> list[AudioFile]:
        audio_files: list[AudioFile] = []
        for name in names:
            path = tmp_path / name
            _ = path.write_bytes(b"")
            audio_files.append(AudioFile(path=path, codec=memory_codec))
        return audio_files

    return _make
