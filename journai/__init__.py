"""Journal analytics and mood-analysis reply interpretation."""

__version__ = "0.1.0"
