"""Expansion and validation engine for resource-oriented API specifications."""

__version__ = "0.1.0"
