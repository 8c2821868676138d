"""CLI commands for svg-text2symbols."""

from svg_text2symbols.cli.commands.render import render
from svg_text2symbols.cli.commands.batch import batch
from svg_text2symbols.cli.commands.fonts import fonts

__all__ = ["render", "batch", "fonts"]
