"""Structured event identifiers attached to log records via ``extra``."""

from __future__ import annotations

from enum import StrEnum


class FlowEvent(StrEnum):
    """Event names understood by ``FlowRichHandler``."""

    FLOW_START = "flow.start"
    FLOW_COMPLETE = "flow.complete"
    FLOW_ERROR = "flow.error"
    FILE_TAGGED = "file.tagged"
    FILE_RENAMED = "file.renamed"
    FILE_RENAME_PLAN = "file.rename.plan"
    MANIFEST_WRITTEN = "manifest.written"
    ARTWORK_WRITTEN = "artwork.written"


__all__ = ["FlowEvent"]
