"""Conference messaging and request management."""

__version__ = "0.1.0"
