from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from otml.cli.utils import load_document, write_text
from otml.conversion import from_text, to_text
from otml.core.exceptions import CastError, NotFound

console = Console(stderr=True)

VALUE_TYPES = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
}


def get_command(
    file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    path: str = typer.Argument(..., help="Dotted path, e.g. server.port or hosts.0"),
    value_type: str = typer.Option(
        "str",
        "--type",
        "-t",
        help="Convert the value: str, int, float or bool",
    ),
    default: Optional[str] = typer.Option(
        None,
        "--default",
        "-d",
        help="Print this instead of failing when the path does not exist",
    ),
):
    """
    Print the value found at a dotted path.
    """
    target = VALUE_TYPES.get(value_type)
    if target is None:
        raise typer.BadParameter(
            f"unknown type {value_type!r}; choose from {', '.join(VALUE_TYPES)}",
            param_hint="--type",
        )

    doc = load_document(file)

    try:
        node = doc.find(path)
        if node.null:
            raise NotFound(f"node at '{path}' is null", source=node.source)
        value = node.read(target)
    except NotFound as exc:
        if default is None:
            console.print(str(exc), style="red", markup=False, highlight=False, soft_wrap=True)
            raise typer.Exit(code=1)
        try:
            value = from_text(default, target)
        except CastError as cast_exc:
            raise typer.BadParameter(str(cast_exc), param_hint="--default")
    except CastError as exc:
        console.print(str(exc), style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=2)

    write_text(to_text(value), out=None)
