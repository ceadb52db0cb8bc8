"""TaskFlow: an in-memory task board with search, filters and analytics."""

__version__ = "0.1.0"
