"""HTML pages and data views over an in-memory game library index."""

__version__ = "0.1.0"