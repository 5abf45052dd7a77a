"""Move an audio file to the name planned from its tags."""

from __future__ import annotations

from pathlib import Path

from albumtags.features.tags import AudioFile
from albumtags.platform.logging import FlowEvent, logger
from albumtags.shared.errors import FileAccessError

from ..domain.filename import FileNamePlanner


def _is_same_file(a: Path, b: Path) -> bool:
    try:
        return a.samefile(b)
    except OSError:
        return False


def rename_audio_file(
    audio_file: AudioFile,
    *,
    dry_run: bool = False,
    sequence: int | None = None,
    total: int | None = None,
) -> Path:
    """Rename ``audio_file`` in place from its own tags and update its path.

    Args:
        audio_file: File to rename; its ``path`` is updated on success.
        dry_run: Only compute and log the target.
        sequence: Position of the file in the current run, for logging.
        total: Number of files in the current run, for logging.

    Returns:
        The (planned) new path.

    Raises:
        MissingTagError: If the tags lack numbering or title.
        FileAccessError: If the target exists or the move fails.
    """
    source = audio_file.path
    target = source.with_name(FileNamePlanner.plan(audio_file.load_tags(), source))
    extra = {
        "sequence": sequence,
        "total_files": total,
        "source_path": source,
        "target_path": target,
        "base_path": source.parent,
    }

    if target == source:
        logger.debug("%s already has its planned name", source)
        return target

    if dry_run:
        logger.info(
            "Would rename %s -> %s",
            source,
            target,
            extra={"flow_event": FlowEvent.FILE_RENAME_PLAN, **extra},
        )
        return target

    if target.exists() and not _is_same_file(source, target):
        raise FileAccessError(f"cannot rename {source.name} to {target.name}: target already exists")

    try:
        _ = source.rename(target)
    except OSError as exc:
        raise FileAccessError(f"cannot rename {source.name} to {target.name}: {exc}") from exc

    audio_file.path = target
    logger.info(
        "Renamed %s -> %s",
        source,
        target,
        extra={"flow_event": FlowEvent.FILE_RENAMED, **extra},
    )
    return target


__all__ = ["rename_audio_file"]
