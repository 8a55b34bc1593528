"""Print every parent of a path, and concatenate input streams."""

__version__ = "0.3.0"
