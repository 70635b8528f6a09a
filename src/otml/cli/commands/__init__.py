"""
CLI command modules for otml.

Each command module defines a single Typer-compatible command function.
"""

from otml.cli.commands.check import check_command
from otml.cli.commands.export import export_command
from otml.cli.commands.fmt import fmt_command
from otml.cli.commands.get import get_command
from otml.cli.commands.stats import stats_command

__all__ = [
    "check_command",
    "export_command",
    "fmt_command",
    "get_command",
    "stats_command",
]
