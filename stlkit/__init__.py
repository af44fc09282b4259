"""Generic containers, heaps, skip lists and sequence algorithms."""

__version__ = "0.1.0"