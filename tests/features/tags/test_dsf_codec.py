"""Tests for the read-only DSF codec."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from albumtags.features.tags.codecs import DsfTagCodec
from albumtags.features.tags.codecs.id3 import build_id3
from albumtags.shared.errors import CodecCapabilityError, ErrorKind
from albumtags.shared.tag_record import TagRecord


class TestDsfTagCodec:
    def test_load_reads_embedded_id3(self, mocker: MockerFixture) -> None:
        record = TagRecord(album="Album", track_number=2, track_total=5, title="Song", artists=["A"])
        audio = mocker.Mock()
        audio.tags = build_id3(record)
        _ = mocker.patch.object(DsfTagCodec, "FILE_CLASS", mocker.Mock(return_value=audio))

        assert DsfTagCodec().load(Path("a.dsf")) == record

    def test_load_without_id3_chunk(self, mocker: MockerFixture) -> None:
        audio = mocker.Mock()
        audio.tags = None
        _ = mocker.patch.object(DsfTagCodec, "FILE_CLASS", mocker.Mock(return_value=audio))

        assert DsfTagCodec().load(Path("a.dsf")) == TagRecord()

    def test_save_is_not_supported(self, tmp_path: Path) -> None:
        with pytest.raises(CodecCapabilityError) as excinfo:
            DsfTagCodec().save(tmp_path / "a.dsf", TagRecord(title="x"))
        assert excinfo.value.kind is ErrorKind.CODEC_CAPABILITY
