"""Cascade: immutable CSS selector builder, JSON helpers and shape values."""

__version__ = "0.1.0"
