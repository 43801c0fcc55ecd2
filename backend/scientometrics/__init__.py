"""Google Scholar author search with researcher / article persistence."""

__version__ = "0.1.0"
