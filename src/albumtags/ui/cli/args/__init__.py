"""Command line argument handling."""

from .options import CLIArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs"]
