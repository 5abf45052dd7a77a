"""Configuration loading for albumtags."""

from .config import Config, FlowSettings

__all__ = ["Config", "FlowSettings"]
