"""Command-line interface for TextTango.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar over character positions
- Verbose/quiet output modes
- Detailed error reporting
"""

from texttango.cli.app import cli, main

__all__ = ["cli", "main"]
