from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console

from otml.core.exceptions import ParseError
from otml.tree.document import OTMLDocument

console = Console()
err_console = Console(stderr=True)


def load_document(path: Path, *, verbose: bool = False) -> OTMLDocument:
    """
    Parse ``path``; a parse failure is printed and ends the command with exit code 1.
    """
    t0 = time.perf_counter()

    try:
        doc = OTMLDocument.parse_file(path)
    except ParseError as exc:
        err_console.print(str(exc), style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {path} in {elapsed:.3f}s")

    return doc


def write_text(payload: str, *, out: Path | None) -> None:
    """
    Write text to stdout or file.
    """
    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        typer.echo(payload)
