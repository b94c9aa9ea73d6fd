"""A turn-based terminal game where a band of developers survives PRODUCTION,
with small helpers for optional values, heaps, lazy values and threads."""

__version__ = "0.1.0"