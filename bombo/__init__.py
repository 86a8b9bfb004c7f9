"""Random winner selection from a participant file."""

__version__ = "1.0.0"
