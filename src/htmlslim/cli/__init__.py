"""Command-line interface for htmlslim.

Reads HTML from a file or stdin, strips what the flags ask for, and writes
the result to a file or stdout.
"""

from htmlslim.cli.main import app

__all__ = ["app"]
