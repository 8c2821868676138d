"""Render command - text or a text file to SVG."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_text2symbols.api import RenderResult, Text2SymbolsRenderer
from svg_text2symbols.config import Config
from svg_text2symbols.exceptions import Text2SymbolsError

console = Console()


def build_config(ctx: click.Context, **overrides) -> Config:
    """Config from the group context with command-line overrides applied."""
    config: Config = (ctx.obj or {}).get("config") or Config.load()
    font_files = overrides.pop("font_files", None)
    if font_files:
        overrides["font_files"] = list(font_files)
    try:
        return config.merged(**overrides)
    except Text2SymbolsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e


def report(result: RenderResult) -> None:
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    for error in result.errors:
        console.print(f"[red]Error:[/red] {error}")


@click.command()
@click.argument("text", required=False)
@click.option("--file", "input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Text file to render")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=Path("output.svg"), show_default=True, help="Output SVG file")
@click.option("--font", help="Font family name")
@click.option("--font-file", "font_files", multiple=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Font file (repeatable)")
@click.option("--size", type=int, help="Font size (line height)")
@click.option("--fill", help="SVG fill mode or fill colour")
@click.option("--color", help="Stroke colour")
@click.option("--space", "letter_spacing", type=float, help="Letter spacing in em")
@click.option("--width", "max_width", type=int, help="Wrap lines at this many characters")
@click.option("-p", "--precision", type=int, help="Path coordinate precision")
@click.option("--animate/--no-animate", default=None, help="Embed the stroke drawing animation")
@click.pass_context
def render(
    ctx: click.Context,
    text: str | None,
    input_file: Path | None,
    output: Path,
    font: str | None,
    font_files: tuple[Path, ...],
    size: int | None,
    fill: str | None,
    color: str | None,
    letter_spacing: float | None,
    max_width: int | None,
    precision: int | None,
    animate: bool | None,
) -> None:
    """Render TEXT (or --file) to an SVG file.

    TEXT: String to render; newlines start new lines.
    """
    if (text is None) == (input_file is None):
        console.print("[red]Error:[/red] Give exactly one of TEXT or --file")
        raise SystemExit(1)

    config = build_config(
        ctx,
        font=font,
        font_files=font_files,
        size=size,
        fill=fill,
        color=color,
        letter_spacing=letter_spacing,
        max_width=max_width,
        precision=precision,
        animate=animate,
    )

    try:
        renderer = Text2SymbolsRenderer(config)
        if input_file is not None:
            result = renderer.render_file(input_file, output)
        else:
            result = renderer.render_text(text)
            if result.success:
                result.save(output)
    except (Text2SymbolsError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    report(result)
    if not result.success:
        raise SystemExit(1)

    doc = result.document
    console.print(
        f"[green]Wrote[/green] {output} "
        f"({result.lines_rendered} lines, {len(doc.symbols)} glyphs, "
        f"{doc.placement_count} placements)"
    )
