"""Parse and validate arXiv article identifiers, categories and stamps."""

__version__ = "1.1.0"