"""Where: albumtags.application.flows
What: Import, export and rename flows plus the command sequencer.
Why: Flows receive their locations explicitly and report failures as results.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from albumtags.config import FlowSettings
from albumtags.features.manifest import load_manifest, write_artwork_file, write_manifest
from albumtags.features.reconcile import apply_album, build_album
from albumtags.features.rename import rename_audio_file
from albumtags.features.tags import AudioFile, find_audio_files
from albumtags.platform.logging import FlowEvent, logger
from albumtags.shared.errors import AlbumTagsError, ErrorKind, NoAudioFilesError


class FlowName(StrEnum):
    """Sub-commands understood by ``run_commands``."""

    IMPORT = "import"
    EXPORT = "export"
    RENAME = "rename"


@dataclass(slots=True, frozen=True)
class FlowResult:
    """Outcome of one flow."""

    flow: FlowName
    success: bool
    files: int = 0
    error_kind: ErrorKind | None = None
    message: str | None = None


def require_audio_files(directory: Path) -> list[AudioFile]:
    """Return the audio files of ``directory``, failing when there are none."""
    audio_files = find_audio_files(directory)
    if not audio_files:
        raise NoAudioFilesError(f"nothing to process in {directory}")
    return audio_files


def import_flow(settings: FlowSettings) -> int:
    """Write the manifest into the tags of the target folder's files."""
    album = load_manifest(settings.manifest_path)
    audio_files = require_audio_files(settings.target_dir)
    return apply_album(audio_files, album)


def export_flow(settings: FlowSettings) -> int:
    """Write a manifest (and cover side-file) derived from the files' tags."""
    audio_files = find_audio_files(settings.target_dir)
    album = build_album(audio_files)

    write_manifest(settings.manifest_path, album)
    logger.info(
        "Wrote manifest %s",
        settings.manifest_path,
        extra={
            "flow_event": FlowEvent.MANIFEST_WRITTEN,
            "source_path": settings.manifest_path,
            "base_path": settings.target_dir,
        },
    )

    artwork_path = write_artwork_file(album.artwork, settings.target_dir, settings.artwork_basename)
    if artwork_path is not None:
        logger.info(
            "Wrote artwork %s",
            artwork_path,
            extra={
                "flow_event": FlowEvent.ARTWORK_WRITTEN,
                "source_path": artwork_path,
                "base_path": settings.target_dir,
            },
        )
    return len(audio_files)


def rename_flow(settings: FlowSettings, *, dry_run: bool = False) -> int:
    """Rename every audio file of the target folder from its own tags."""
    audio_files = require_audio_files(settings.target_dir)
    total = len(audio_files)
    for sequence, audio_file in enumerate(audio_files, start=1):
        _ = rename_audio_file(audio_file, dry_run=dry_run, sequence=sequence, total=total)
    return total


def run_flow(flow: FlowName, settings: FlowSettings, *, dry_run: bool = False) -> FlowResult:
    """Run one flow, converting albumtags failures into a failed result."""
    start = time.perf_counter()
    logger.info(
        "%s started in %s",
        flow,
        settings.target_dir,
        extra={"flow_event": FlowEvent.FLOW_START, "flow": flow.value},
    )
    try:
        match flow:
            case FlowName.IMPORT:
                files = import_flow(settings)
            case FlowName.EXPORT:
                files = export_flow(settings)
            case FlowName.RENAME:
                files = rename_flow(settings, dry_run=dry_run)
    except AlbumTagsError as exc:
        logger.error(
            "%s failed: %s",
            flow,
            exc.message,
            extra={
                "flow_event": FlowEvent.FLOW_ERROR,
                "flow": flow.value,
                "error_message": exc.message,
            },
        )
        return FlowResult(flow=flow, success=False, error_kind=exc.kind, message=exc.message)

    logger.info(
        "%s complete (%d files)",
        flow,
        files,
        extra={
            "flow_event": FlowEvent.FLOW_COMPLETE,
            "flow": flow.value,
            "total_files": files,
            "duration_seconds": time.perf_counter() - start,
        },
    )
    return FlowResult(flow=flow, success=True, files=files)


def default_flows(settings: FlowSettings) -> list[FlowName]:
    """Import then rename when a manifest exists, otherwise export."""
    if settings.manifest_path.exists():
        return [FlowName.IMPORT, FlowName.RENAME]
    return [FlowName.EXPORT]


def run_commands(
    commands: Sequence[FlowName],
    settings: FlowSettings,
    *,
    dry_run: bool = False,
) -> list[FlowResult]:
    """Run ``commands`` in order, stopping after the first failure."""
    results: list[FlowResult] = []
    for flow in commands or default_flows(settings):
        result = run_flow(flow, settings, dry_run=dry_run)
        results.append(result)
        if not result.success:
            break
    return results


__all__ = [
    "FlowName",
    "FlowResult",
    "default_flows",
    "export_flow",
    "import_flow",
    "rename_flow",
    "require_audio_files",
    "run_commands",
    "run_flow",
]
