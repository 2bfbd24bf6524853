"""Generic data structures, option helpers and field copiers."""

__version__ = "0.1.0"