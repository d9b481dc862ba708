"""Command-line interface for seqfuzz."""

from .main import main

__all__ = ["main"]
