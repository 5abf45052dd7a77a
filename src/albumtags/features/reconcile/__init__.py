"""
Summary: Positional reconciliation between an Album and a folder of audio files.
Why: Offer a stable import path for import and export usecases.
"""

from .usecases.exporter import build_album
from .usecases.importer import apply_album, compose_record

__all__ = ["apply_album", "build_album", "compose_record"]
