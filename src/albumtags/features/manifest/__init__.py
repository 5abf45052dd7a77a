"""
Summary: Text manifest grammar, parsing and serialization.
Why: Provide a stable import path for the flows and tests.
"""

from .usecases.artwork import find_artwork_file, write_artwork_file
from .usecases.reader import load_manifest, parse_manifest, parse_track_line
from .usecases.writer import render_manifest, write_manifest

__all__ = [
    "find_artwork_file",
    "load_manifest",
    "parse_manifest",
    "parse_track_line",
    "render_manifest",
    "write_artwork_file",
    "write_manifest",
]
