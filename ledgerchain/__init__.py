"""Load, format, hash, verify and compress chains of money transfers."""

__version__ = "0.1.0"