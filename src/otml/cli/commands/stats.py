from __future__ import annotations

from pathlib import Path
from typing import Dict

import typer
from rich.console import Console
from rich.table import Table

from otml.cli.utils import load_document
from otml.tree.node import OTMLNode

console = Console()


def collect_stats(root: OTMLNode) -> Dict[str, int]:
    """Count node kinds below ``root`` (the root itself is not counted)."""
    stats = {
        "nodes": 0,
        "tagged": 0,
        "untagged": 0,
        "null": 0,
        "unique": 0,
        "block_values": 0,
        "max_depth": 0,
    }

    def walk(node: OTMLNode, depth: int) -> None:
        for index in range(node.size):
            child = node.at_index(index)
            stats["nodes"] += 1
            stats["tagged" if child.has_tag() else "untagged"] += 1
            if child.null:
                stats["null"] += 1
            if child.unique:
                stats["unique"] += 1
            if child.has_value() and "\n" in child.value:
                stats["block_values"] += 1
            stats["max_depth"] = max(stats["max_depth"], depth)
            walk(child, depth + 1)

    walk(root, 1)
    return stats


def stats_command(
    file: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for an OTML file.
    """
    doc = load_document(file, verbose=verbose)
    stats = collect_stats(doc)

    table = Table(title="OTML Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Nodes", str(stats["nodes"]))
    table.add_row("Tagged", str(stats["tagged"]))
    table.add_row("Untagged", str(stats["untagged"]))
    table.add_row("Null", str(stats["null"]))
    table.add_row("Unique", str(stats["unique"]))
    table.add_row("Block values", str(stats["block_values"]))
    table.add_row("Max depth", str(stats["max_depth"]))

    console.print(table)
