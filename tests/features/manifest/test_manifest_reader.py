"""Tests for manifest parsing."""

from __future__ import annotations

import unicodedata
from pathlib import Path

import pytest

from albumtags.features.manifest import load_manifest, parse_manifest, parse_track_line
from albumtags.features.manifest.usecases.reader import read_manifest_text
from albumtags.shared.errors import ErrorKind, FileAccessError, ImageFormatError, ManifestSyntaxError
from albumtags.shared.image import ImageFormat

from tests.helpers import JPEG_BYTES, PNG_BYTES

HEADER = "Album\nBand\n2020-01-02\n\n"


class TestParseTrackLine:
    def test_title_only(self) -> None:
        assert parse_track_line("Song") == ("Song", [])

    def test_title_and_artists(self) -> None:
        assert parse_track_line("T//A1//A2") == ("T", ["A1", "A2"])

    def test_empty_segments_are_kept(self) -> None:
        assert parse_track_line("T////A") == ("T", ["", "A"])


class TestParseManifest:
    def test_single_disc(self) -> None:
        album = parse_manifest(HEADER + "One//X\nTwo\n")

        assert (album.title, album.artist, album.release_date) == ("Album", "Band", "2020-01-02")
        assert len(album.discs) == 1
        assert [(t.title, t.artists) for t in album.discs[0].tracks] == [("One", ["X"]), ("Two", [])]

    def test_blank_line_starts_new_disc(self) -> None:
        album = parse_manifest(HEADER + "One\nTwo\n\nThree\n")

        assert [len(disc) for disc in album.discs] == [2, 1]

    def test_trailing_blank_line_does_not_add_a_disc(self) -> None:
        album = parse_manifest(HEADER + "One\n\n")

        assert [len(disc) for disc in album.discs] == [1]

    def test_header_only_gives_one_empty_disc(self) -> None:
        album = parse_manifest(HEADER)

        assert [len(disc) for disc in album.discs] == [0]
        assert album.track_count == 0

    def test_crlf_line_endings(self) -> None:
        album = parse_manifest("Album\r\nBand\r\n2020-01-02\r\n\r\nOne\r\n")

        assert album.title == "Album"
        assert album.discs[0].tracks[0].title == "One"

    def test_header_fields_are_trimmed(self) -> None:
        album = parse_manifest("  Album \nBand\t\n2020-01-02 \n\nOne\n")

        assert (album.title, album.artist) == ("Album", "Band")

    def test_text_is_nfc_normalized(self) -> None:
        decomposed = unicodedata.normalize("NFD", "Café")

        album = parse_manifest(f"{decomposed}\nBand\n2020-01-02\n\n{decomposed}\n")

        assert album.title == "Café"
        assert album.discs[0].tracks[0].title == "Café"

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("", "missing album name"),
            ("Album\n", "missing album artist"),
            ("Album\nBand\n", "missing release date"),
            ("Album\nBand\n2020-1-2\n\n", "release date must be YYYY-MM-DD"),
            ("Album\nBand\n2020-01-02\n", "missing blank line after the release date"),
            ("Album\nBand\n2020-01-02\nOne\n", "line after the release date must be blank"),
            (HEADER + "\nOne\n", "consecutive blank lines"),
            (HEADER + "One\n\n\nTwo\n", "consecutive blank lines"),
        ],
    )
    def test_syntax_errors(self, text: str, message: str) -> None:
        with pytest.raises(ManifestSyntaxError) as excinfo:
            _ = parse_manifest(text)

        assert message in excinfo.value.message
        assert excinfo.value.kind is ErrorKind.MANIFEST_SYNTAX

    def test_error_reports_line_number(self) -> None:
        with pytest.raises(ManifestSyntaxError) as excinfo:
            _ = parse_manifest(HEADER + "One\n\n\n")

        assert excinfo.value.line_number == 7
        assert excinfo.value.message.startswith("line 7: ")

    def test_non_ascii_digits_are_not_a_date(self) -> None:
        with pytest.raises(ManifestSyntaxError):
            _ = parse_manifest("Album\nBand\n２０２０-01-02\n\n")


class TestLoadManifest:
    def test_attaches_first_image_by_name(self, tmp_path: Path) -> None:
        manifest = tmp_path / "tags"
        _ = manifest.write_text(HEADER + "One\n", encoding="utf-8")
        _ = (tmp_path / "b.png").write_bytes(PNG_BYTES)
        _ = (tmp_path / "a.JPG").write_bytes(JPEG_BYTES)

        album = load_manifest(manifest)

        assert album.artwork is not None
        assert album.artwork.format is ImageFormat.JPEG
        assert album.artwork.data == JPEG_BYTES

    def test_no_image(self, tmp_path: Path) -> None:
        manifest = tmp_path / "tags"
        _ = manifest.write_text(HEADER + "One\n", encoding="utf-8")

        assert load_manifest(manifest).artwork is None

    def test_image_extension_decides_format(self, tmp_path: Path) -> None:
        manifest = tmp_path / "tags"
        _ = manifest.write_text(HEADER + "One\n", encoding="utf-8")
        _ = (tmp_path / "Folder.png").write_bytes(JPEG_BYTES)

        album = load_manifest(manifest)

        assert album.artwork is not None
        assert album.artwork.format is ImageFormat.PNG

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileAccessError):
            _ = read_manifest_text(tmp_path / "tags")

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        manifest = tmp_path / "tags"
        _ = manifest.write_bytes(b"\xff\xfe\xfa\n")

        with pytest.raises(FileAccessError):
            _ = read_manifest_text(manifest)

    def test_unrecognised_image_is_ignored(self, tmp_path: Path) -> None:
        manifest = tmp_path / "tags"
        _ = manifest.write_text(HEADER + "One\n", encoding="utf-8")
        _ = (tmp_path / "cover.gif").write_bytes(b"GIF89a")

        assert load_manifest(manifest).artwork is None
        with pytest.raises(ImageFormatError):
            _ = ImageFormat.from_path(tmp_path / "cover.gif")
