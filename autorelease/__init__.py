"""Automatic tag and release creation when a project's version changes."""

__version__ = "0.1.0"
