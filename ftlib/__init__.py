"""String, character, memory, linked-list, output and printf-style formatting helpers."""

__version__ = "0.1.0"