"""Lucent: style and content reflection service."""
__version__ = "1.0.0"
