"""Configurable spawn egg drops for mobs."""

__version__ = "0.1.0"
