"""Infrastructure helpers (logging, filesystem) shared by all features."""
