# src/pdfqa/cli/app.py
"""Command-line interface for pdfqa.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Creates progress callbacks (for Rich display)
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pdfqa import __version__
from pdfqa.commands import (
    ChunkInfo,
    GenerateResult,
    ProgressUpdate,
    config_cmd,
    generate,
    inspect,
    split,
)
from pdfqa.config import load_env_file
from pdfqa.logging_config import configure_logging

app = typer.Typer(
    name="pdfqa",
    help="pdfqa - Build Q&A fine-tuning datasets from PDF documents.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"pdfqa {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """pdfqa - Q&A datasets from PDFs."""
    load_env_file()
    configure_logging(verbose=verbose)


def _fail(message: str | None) -> NoReturn:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def _chunk_table(title: str, chunks: list[ChunkInfo], show_pairs: bool = False) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Pages", justify="right")
    table.add_column("Section")
    if show_pairs:
        table.add_column("Pairs", justify="right", style="green")

    for chunk in chunks:
        pages = (
            str(chunk.start_page)
            if chunk.start_page == chunk.end_page
            else f"{chunk.start_page}-{chunk.end_page}"
        )
        row = [str(chunk.id), pages, chunk.context_title or "[dim]-[/dim]"]
        if show_pairs:
            row.append(str(chunk.pairs))
        table.add_row(*row)
    return table


@app.command(name="inspect")
def inspect_cmd(
    path: str = typer.Argument(..., help="PDF file to inspect"),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Show page count, outline and text layer of a PDF."""
    result = inspect.inspect(path)

    if not result.success:
        _fail(result.error)

    if plain:
        console.print(f"Document: {result.name}")
        console.print(f"  Pages: {result.page_count}")
        console.print(f"  Outline: {'yes' if result.has_outline else 'no'}")
        console.print(f"  Text layer: {'yes' if result.is_text_based else 'no'}")
    else:
        table = Table(title=result.name)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green", justify="right")
        table.add_row("Pages", str(result.page_count))
        table.add_row("Outline", "yes" if result.has_outline else "[yellow]no[/yellow]")
        table.add_row("Text layer", "yes" if result.is_text_based else "[yellow]no[/yellow]")
        console.print(table)

    if not result.has_outline:
        console.print(
            "[dim]No outline: use 'pdfqa generate --chunk START-END' to split by hand.[/dim]"
        )
    if not result.is_text_based:
        console.print("[dim]First page has no text; pages will be sent as a PDF attachment.[/dim]")


@app.command(name="split")
def split_cmd(
    path: str = typer.Argument(..., help="PDF file to split"),
    max_pages: int = typer.Option(
        None,
        "--max-pages",
        "-m",
        min=1,
        help="Maximum pages per chunk (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Preview the chunks derived from a PDF outline."""
    result = split.split(path, max_pages_per_chunk=max_pages, config_path=config_file)

    if not result.success:
        _fail(result.error)

    if plain:
        console.print(f"{result.name}: {len(result.chunks)} chunks over {result.page_count} pages")
        for chunk in result.chunks:
            title = chunk.context_title or "-"
            console.print(f"  #{chunk.id} pages {chunk.start_page}-{chunk.end_page} {title}")
    else:
        console.print(_chunk_table(f"{result.name} ({len(result.chunks)} chunks)", result.chunks))


@app.command(name="generate")
def generate_cmd(
    path: str = typer.Argument(..., help="PDF file to generate Q&A pairs from"),
    chunk: list[str] = typer.Option(
        None,
        "--chunk",
        help="Manual chunk as START-END (repeatable). Default: split by outline",
    ),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Dataset file (default: qa_dataset.json)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
    no_progress: bool = typer.Option(
        False,
        "--no-progress",
        help="Disable progress bars",
    ),
) -> None:
    """Generate Q&A pairs for every chunk and export them as JSONL."""
    try:
        page_ranges = [generate.parse_page_range(value) for value in chunk or []]
    except ValueError as e:
        _fail(str(e))

    show_progress = not plain and not no_progress and console.is_terminal

    if show_progress:
        result = _generate_with_progress(path, page_ranges, output, config_file)
    else:
        result = generate.generate(
            path,
            page_ranges=page_ranges,
            output=output,
            config_path=config_file,
        )

    _render_generate_result(result, plain=plain)


def _generate_with_progress(
    path: str,
    page_ranges: list[tuple[int, int]],
    output: str | None,
    config_file: str | None,
) -> GenerateResult:
    """Generate with a Rich progress bar."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[bold]{task.fields[stage]:>12}", justify="right"),
        BarColumn(bar_width=20),
        TextColumn("{task.fields[progress_text]}", style="cyan"),
        TextColumn("{task.description}", style="dim"),
        console=console,
    ) as progress:
        task = progress.add_task("", total=None, stage="", progress_text="")

        def on_progress(update: ProgressUpdate) -> None:
            stage_name = update.stage.value
            if update.is_indeterminate:
                progress.update(
                    task,
                    stage=stage_name,
                    progress_text="",
                    description=update.message or "",
                    total=None,
                )
            else:
                progress.update(
                    task,
                    stage=stage_name,
                    progress_text=f"{update.percentage}%",
                    description=f"({update.current}/{update.total})",
                    total=update.total,
                    completed=update.current,
                )

        return generate.generate(
            path,
            page_ranges=page_ranges,
            output=output,
            config_path=config_file,
            on_progress=on_progress,
        )


def _render_generate_result(result: GenerateResult, plain: bool) -> None:
    """Render generate result to console."""
    if plain:
        console.print(f"Generated {result.chunks_completed}/{result.chunks_total} chunks")
        if result.output_path:
            console.print(f"Saved {result.pairs_written} Q&A pairs to {result.output_path}")
    else:
        if result.chunks:
            console.print(_chunk_table("Chunks", result.chunks, show_pairs=True))
        if result.output_path:
            console.print(
                f"[green]Saved {result.pairs_written} Q&A pairs to {result.output_path}[/green]"
            )

    if not result.success:
        _fail(result.error)


@app.command(name="config")
def config_cmd_handler(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        _fail(result.error)

    table = Table(title="pdfqa Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    table.add_row("", "", "")
    table.add_row(
        "api_key",
        "(set)" if result.api_key_set else "(not set)",
        result.api_key_source or "env var",
    )

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")
