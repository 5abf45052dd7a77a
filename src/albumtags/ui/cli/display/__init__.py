"""Console rendering for CLI results."""

from .result import ResultDisplay

__all__ = ["ResultDisplay"]
