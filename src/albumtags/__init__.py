"""albumtags - reconcile an album manifest with the tags of its audio files."""

__version__ = "0.1.0"
