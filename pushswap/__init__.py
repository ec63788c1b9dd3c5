"""Two-stack integer sorting with a limited instruction set, and replay helpers."""

__version__ = "1.0.0"