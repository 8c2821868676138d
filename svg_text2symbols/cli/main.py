"""svg-text2symbols command group."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_text2symbols import __version__
from svg_text2symbols.cli.commands import batch, fonts, render
from svg_text2symbols.config import Config
from svg_text2symbols.exceptions import ConfigError
from svg_text2symbols.log import configure_logging

console = Console()


@click.group()
@click.version_option(__version__, prog_name="svg-text2symbols")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging verbosity (default from config, else WARNING)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, config_path: Path | None) -> None:
    """Render text into SVG with one shared definition per glyph."""
    try:
        config = Config.load(config_path)
    except (ConfigError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    level = log_level.upper() if log_level else config.log_level
    configure_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(render)
cli.add_command(batch)
cli.add_command(fonts)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
