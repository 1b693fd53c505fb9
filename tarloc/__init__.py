"""Per-language line counts for the files inside a tar archive."""

__version__ = "0.1.0"
