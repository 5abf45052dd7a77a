"""Rich console handler for structured flow events."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class FlowRichHandler(RichHandler):
    """Rich handler that renders ``flow_event`` records with icons and compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "flow.start": ("🚀", "cyan"),
        "flow.complete": ("✅", "green"),
        "flow.error": ("❌", "red"),
        "file.tagged": ("🏷️", "blue"),
        "file.renamed": ("📦", "magenta"),
        "file.rename.plan": ("📝", "yellow"),
        "manifest.written": ("📄", "green"),
        "artwork.written": ("🖼️", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` keeping only its last segments.

        Args:
            path: Absolute or relative path string to format.
            base: Optional directory the path should be shown relative to.

        Returns:
            Text: Styled path with magenta separators.
        """
        display_path = PurePath(path)
        if base is not None:
            try:
                relative = display_path.relative_to(base)
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                display_path = relative

        parts = [part for part in display_path.parts if part and part != display_path.anchor]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT :]

        text = Text()
        if truncated:
            _ = text.append("…/", style=Style(color="magenta"))
        elif display_path.anchor:
            _ = text.append(display_path.anchor, style=Style(color="magenta"))
        for index, part in enumerate(parts):
            if index:
                _ = text.append("/", style=Style(color="magenta"))
            _ = text.append(part, style=Style(color="white"))
        if not parts and not text.plain:
            _ = text.append(".", style=Style(color="white"))
        return text

    def _render_flow_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured flow events with dedicated styling."""

        event = getattr(record, "flow_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        base = getattr(record, "base_path", None)
        base = str(base) if base is not None else None

        if event.startswith("flow."):
            flow = getattr(record, "flow", None)
            label = {
                "flow.start": "Start",
                "flow.complete": "Complete",
                "flow.error": "Failed",
            }.get(event, event)
            _ = body.append(f"{flow} {label}" if flow else label)
            details: list[str] = []
            files = getattr(record, "total_files", None)
            if isinstance(files, int):
                details.append(f"files={files}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(str(error_message))
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        else:
            sequence = getattr(record, "sequence", None)
            total_files = getattr(record, "total_files", None)
            if isinstance(sequence, int) and sequence > 0:
                if isinstance(total_files, int) and total_files > 0:
                    _ = body.append(f"[{sequence}/{total_files}] ")
                else:
                    _ = body.append(f"[{sequence}] ")

            source_path = getattr(record, "source_path", None)
            target_path = getattr(record, "target_path", None)
            if source_path is not None:
                _ = body.append_text(self._format_path(str(source_path), base=base))
            if target_path is not None:
                _ = body.append(" → ")
                _ = body.append_text(self._format_path(str(target_path), base=base))
            title = getattr(record, "title", None)
            if title:
                _ = body.append(f" ({title})")
            if source_path is None and target_path is None and title is None:
                _ = body.append(message)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for flow events."""

        flow_text = self._render_flow_message(record, message)
        if flow_text is not None:
            return flow_text
        return super().render_message(record, message)


__all__ = ["FlowRichHandler"]
