"""dupectl - find and remove duplicate files."""

__version__ = "0.1.0"
