"""
CLI for portpath.

Provides command-line access to the path-string operations for either
platform's conventions.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from portpath.core.config import configure_logging, load_config
from portpath.core.errors import PortPathError
from portpath.core.validation import check_invalid_file_name_chars
from portpath.services import PathService

# Initialize Rich Console
console = Console()

app = typer.Typer(
    name="portpath",
    help="Platform-aware path-string manipulation",
    add_completion=False,
)


def _print_value(value: str) -> None:
    """Print a raw path without Rich markup, emoji codes, highlighting or wrapping."""
    console.print(value, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", emoji=False, soft_wrap=True)
    raise typer.Exit(1)


def _service(ctx: typer.Context) -> PathService:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    platform: Optional[str] = typer.Option(
        None, "--platform", "-p", help="Path conventions: windows, posix or auto"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (.yaml, .yml or .json)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Read or rewrite path components without touching the file system."""
    try:
        cfg = load_config(config)
        if platform is not None:
            cfg.platform.name = platform
        if verbose:
            cfg.logging.level = "DEBUG"
        configure_logging(cfg.logging)
        ctx.obj = PathService.from_config(cfg)
    except (PortPathError, FileNotFoundError, ValueError, TypeError) as e:
        _fail(str(e))


@app.command()
def ext(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to inspect"),
):
    """Print the extension of a path (empty if it has none)."""
    try:
        _print_value(_service(ctx).get_extension(path))
    except PortPathError as e:
        _fail(str(e))


@app.command("change-ext")
def change_ext(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to rewrite"),
    extension: Optional[str] = typer.Argument(None, help="New extension, e.g. .pdf"),
    strip: bool = typer.Option(False, "--strip", "-s", help="Remove the extension"),
):
    """Replace, add or remove the extension of a path."""
    if extension is None and not strip:
        _fail("Provide an EXTENSION or use --strip")
    if extension is not None and strip:
        _fail("EXTENSION and --strip are mutually exclusive")

    try:
        _print_value(_service(ctx).change_extension(path, None if strip else extension))
    except PortPathError as e:
        _fail(str(e))


@app.command()
def dirname(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to inspect"),
):
    """Print the parent directory of a path."""
    try:
        result = _service(ctx).get_directory_name(path)
    except PortPathError as e:
        _fail(str(e))

    if result is None:
        console.print(
            f"[yellow]'{escape(path)}' is a root and has no parent directory[/yellow]",
            markup=True,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(1)
    _print_value(result)


@app.command()
def root(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to inspect"),
):
    """Print the root length and root prefix of a path."""
    service = _service(ctx)
    try:
        length = service.get_root_length(path)
    except PortPathError as e:
        _fail(str(e))

    _print_value(str(length))
    if length:
        _print_value(path[:length])


@app.command()
def check(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to validate"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Also reject '*' and '?'"
    ),
    file_name: bool = typer.Option(
        False, "--file-name", help="Validate as a bare file name (no separators)"
    ),
):
    """Validate a path against the illegal character sets."""
    try:
        if file_name:
            check_invalid_file_name_chars(path)
        else:
            _service(ctx).validate(path, strict)
    except PortPathError as e:
        _fail(str(e))

    console.print("[bold green]OK[/bold green]")


@app.command()
def info(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to inspect"),
):
    """Show every component of a path."""
    service = _service(ctx)
    try:
        root_length = service.get_root_length(path)
        rows = [
            ("Platform", service.platform.value),
            ("Root length", str(root_length)),
            ("Root", path[:root_length]),
            ("Rooted", str(service.is_path_rooted(path))),
            ("Directory", _display(service.get_directory_name(path))),
            ("File name", _display(service.get_file_name(path))),
            ("Stem", _display(service.get_file_name_without_extension(path))),
            ("Extension", _display(service.get_extension(path))),
        ]
    except PortPathError as e:
        _fail(str(e))

    table = Table(title=Text(path), show_header=False)
    table.add_column("Component", style="bold")
    table.add_column("Value")
    for label, value in rows:
        table.add_row(label, Text(value))
    console.print(table)


def _display(value: Optional[str]) -> str:
    return "<none>" if value is None else value


if __name__ == "__main__":
    app()
