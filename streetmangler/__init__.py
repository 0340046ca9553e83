"""Street name validation against per-locale dictionaries."""

__version__ = "0.3.0"
