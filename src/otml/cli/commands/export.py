from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from otml.cli.utils import load_document, write_text
from otml.exporter.json_exporter import export_tree_json, serialize_tree_to_json_string

console = Console()


def export_command(
    file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export an OTML tree to JSON (stdout by default).
    """
    doc = load_document(file, verbose=verbose)
    indent = 2 if pretty else None

    if verbose:
        console.log("Exporting JSON")

    if out is not None:
        export_tree_json(doc, out, indent=indent)
    else:
        write_text(serialize_tree_to_json_string(doc, indent=indent), out=None)

    if verbose:
        console.log("Export complete")
