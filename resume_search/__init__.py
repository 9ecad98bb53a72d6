"""Interactive client for the resume semantic-search service."""

__version__ = "0.1.0"
