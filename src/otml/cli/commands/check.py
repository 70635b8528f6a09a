from __future__ import annotations

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from otml.core.exceptions import ParseError
from otml.tree.document import OTMLDocument

console = Console()


def check_command(
    files: List[Path] = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only report failures",
    ),
):
    """
    Parse OTML files and report the first error in each.
    """
    failed = 0

    for path in files:
        try:
            doc = OTMLDocument.parse_file(path)
        except ParseError as exc:
            failed += 1
            console.print(f"[red]FAIL[/red] {path}", highlight=False, soft_wrap=True)
            console.print(str(exc), markup=False, highlight=False, soft_wrap=True)
            continue

        if not quiet:
            count = sum(1 for _ in doc.iter_subtree()) - 1
            console.print(f"[green]OK[/green] {path} ({count} nodes)", highlight=False, soft_wrap=True)

    if failed:
        raise typer.Exit(code=1)
