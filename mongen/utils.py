"""Shared utility functions for mongen.

Provides the Rich console used for all user-facing output, coloured message
helpers, a field summary table, and the file-system helpers the scaffolder
uses to create directories and write generated files.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mongen.parser.models import FieldSpec

console = Console()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object for the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path* in one call, creating parent directories.

    Existing files are overwritten.
    """
    file_path = Path(path)
    ensure_dir(file_path.parent)
    file_path.write_text(content, encoding="utf-8")
    return file_path


async def write_file_async(path: str | Path, content: str) -> Path:
    """Run :func:`write_file` in a worker thread."""
    return await asyncio.to_thread(write_file, path, content)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]")


def print_fields_table(model_name: str, fields: Iterable[FieldSpec]) -> None:
    """Print the parsed fields of *model_name* as a table."""
    table = Table(title=f"{model_name} fields", show_header=True, header_style="bold cyan")
    table.add_column("Name", no_wrap=True)
    table.add_column("Type")
    table.add_column("Array")
    table.add_column("Reference", style="dim")

    for field in fields:
        table.add_row(
            field.name,
            field.type.value,
            "yes" if field.is_array else "no",
            field.reference or "-",
        )

    console.print(table)
