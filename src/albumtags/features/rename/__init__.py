"""
Summary: Derive file names from tags and move files accordingly.
Why: Offer a stable import path for the rename flow and tests.
"""

from .domain.filename import FileNamePlanner
from .usecases.renamer import rename_audio_file

__all__ = ["FileNamePlanner", "rename_audio_file"]
