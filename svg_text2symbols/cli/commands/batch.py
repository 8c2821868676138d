"""Batch command - render multiple text files."""

from __future__ import annotations

import concurrent.futures
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.progress import Progress

from svg_text2symbols.api import RenderResult, Text2SymbolsRenderer
from svg_text2symbols.cli.commands.render import build_config
from svg_text2symbols.config import Config

console = Console()


def collect_inputs(inputs: tuple[Path, ...], batch_file: Optional[Path]) -> list[Path]:
    """Inputs from arguments plus a list file (one path per line, # comments)."""
    all_inputs: list[Path] = list(inputs)
    if batch_file:
        with open(batch_file, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    all_inputs.append(Path(line))
    return all_inputs


def render_one(config: Config, input_path: Path, output_path: Path) -> RenderResult:
    # One renderer per document: symbol caches are never shared.
    renderer = Text2SymbolsRenderer(config)
    return renderer.render_file(input_path, output_path)


@click.command()
@click.argument("inputs", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output-dir", "-o", type=click.Path(path_type=Path), required=True, help="Output directory")
@click.option("--batch-file", type=click.Path(exists=True, path_type=Path), help="File containing list of inputs")
@click.option("--font", help="Font family name")
@click.option("--font-file", "font_files", multiple=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Font file (repeatable)")
@click.option("--size", type=int, help="Font size (line height)")
@click.option("--width", "max_width", type=int, help="Wrap lines at this many characters")
@click.option("--suffix", default="", help="Output filename suffix")
@click.option("-j", "--jobs", type=int, default=4, help="Parallel jobs")
@click.option("--continue-on-error", is_flag=True, help="Continue processing on errors")
@click.pass_context
def batch(
    ctx: click.Context,
    inputs: tuple[Path, ...],
    output_dir: Path,
    batch_file: Optional[Path],
    font: Optional[str],
    font_files: tuple[Path, ...],
    size: Optional[int],
    max_width: Optional[int],
    suffix: str,
    jobs: int,
    continue_on_error: bool,
) -> None:
    """Render multiple text files to SVG.

    INPUTS: Paths to text files (supports glob patterns via shell).
    """
    config = build_config(ctx, font=font, font_files=font_files, size=size, max_width=max_width)

    all_inputs = collect_inputs(inputs, batch_file)
    if not all_inputs:
        console.print("[red]Error:[/red] No input files specified")
        raise SystemExit(1)

    output_dir.mkdir(parents=True, exist_ok=True)

    success_count = 0
    error_count = 0

    with Progress(console=console) as progress:
        task = progress.add_task("[green]Rendering...", total=len(all_inputs))

        with concurrent.futures.ThreadPoolExecutor(max_workers=max(jobs, 1)) as executor:
            future_to_path = {
                executor.submit(render_one, config, p, output_dir / f"{p.stem}{suffix}.svg"): p
                for p in all_inputs
            }

            for future in concurrent.futures.as_completed(future_to_path):
                input_path = future_to_path[future]
                try:
                    result = future.result()
                    if result.success:
                        success_count += 1
                    else:
                        error_count += 1
                        if not continue_on_error:
                            console.print(f"[red]Error in {input_path}:[/red] {result.errors}")
                            raise SystemExit(1)
                except SystemExit:
                    raise
                except Exception as e:
                    error_count += 1
                    if not continue_on_error:
                        console.print(f"[red]Error processing {input_path}:[/red] {e}")
                        raise SystemExit(1) from e
                finally:
                    progress.advance(task)

    console.print()
    console.print("[bold]Batch complete:[/bold]")
    console.print(f"  [green]Success:[/green] {success_count}")
    console.print(f"  [red]Failed:[/red] {error_count}")
    console.print(f"  [blue]Output:[/blue] {output_dir}")
