"""Docshelf - versioned documentation archive server."""

__version__ = "0.1.0"
