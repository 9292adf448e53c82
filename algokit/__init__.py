"""Classic competitive-programming problems solved as small Python functions."""

__version__ = "0.1.0"