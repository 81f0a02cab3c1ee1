"""Semantic-version tagging and release creation from conventional commits."""

__version__ = "0.3.0"
