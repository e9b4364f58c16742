"""iTombs - family tree for digital memorials."""

__version__ = "0.1.0"
