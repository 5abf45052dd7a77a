"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, event names and Rich handler.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import logger, setup_logger
from .events import FlowEvent
from .handlers import FlowRichHandler

__all__ = [
    "FlowEvent",
    "FlowRichHandler",
    "logger",
    "setup_logger",
]
