"""Fonts command - font discovery utilities."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from svg_text2symbols.exceptions import Text2SymbolsError
from svg_text2symbols.fonts import FontFamily, list_families

console = Console()


@click.group()
def fonts() -> None:
    """Font discovery commands."""
    pass


@fonts.command("list")
@click.option("--family", help="Filter by font family name (substring)")
def list_fonts(family: str | None) -> None:
    """List installed font families."""
    with console.status("[bold green]Loading fonts..."):
        names = list_families()

    table = Table(title="Installed Font Families")
    table.add_column("Family", style="cyan")

    count = 0
    for name in names:
        if family and family.lower() not in name.lower():
            continue
        table.add_row(name)
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} families")


@fonts.command("styles")
@click.argument("name", required=False)
@click.option(
    "--font-file",
    "font_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Inspect these files instead of an installed family",
)
def family_styles(name: str | None, font_files: tuple[Path, ...]) -> None:
    """Show which face serves each style of a family."""
    if not name and not font_files:
        console.print("[red]Error:[/red] Give a family NAME or --font-file")
        raise SystemExit(1)

    with console.status("[bold green]Resolving family..."):
        try:
            if font_files:
                family = FontFamily.from_files(font_files, name)
            else:
                family = FontFamily.from_system(name)
        except (Text2SymbolsError, OSError) as e:
            console.print(f"[red]Not found:[/red] {e}")
            raise SystemExit(1) from e

    table = Table(title=f"Faces of {family.name}")
    table.add_column("Style", style="green")
    table.add_column("Full name", style="cyan")
    table.add_column("Weight", style="yellow")
    table.add_column("Path", style="dim")

    for style, face in family.faces().items():
        font_path = f"{face.path}:{face.font_index}"
        table.add_row(
            style.value,
            face.full_name,
            str(face.weight),
            font_path[:50] + "..." if len(font_path) > 50 else font_path,
        )

    console.print(table)
