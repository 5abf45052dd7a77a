"""
Summary: In-memory album hierarchy shared by the manifest and the reconciler.
Why: Offer a stable import path independent of the domain module layout.
"""

from .domain.models import Album, Disc, Track

__all__ = ["Album", "Disc", "Track"]
