"""Timeline: a minimal microblog timeline backend."""

__version__ = "0.1"
