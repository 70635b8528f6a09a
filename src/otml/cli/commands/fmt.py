from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from otml.cli.utils import load_document, write_text

console = Console()


def fmt_command(
    file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Exit with 1 if the file is not in canonical form; write nothing",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Rewrite an OTML file in canonical form (stdout by default).
    """
    doc = load_document(file, verbose=verbose)
    canonical = doc.emit()

    if check:
        current = file.read_text(encoding="utf-8")
        if current != canonical + "\n":
            console.print(f"would reformat {file}", markup=False, highlight=False, soft_wrap=True)
            raise typer.Exit(code=1)
        if verbose:
            console.log(f"{file} is canonical")
        return

    if out is not None:
        if not doc.save(out):
            console.print(f"[red]cannot write {out}[/red]", highlight=False, soft_wrap=True)
            raise typer.Exit(code=1)
        if verbose:
            console.log(f"Wrote {out}")
        return

    write_text(canonical, out=None)
