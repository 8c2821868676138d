"""Command-line interface for svg-text2symbols."""

from svg_text2symbols.cli.main import cli

__all__ = ["cli"]
