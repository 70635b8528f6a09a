from __future__ import annotations

import typer

from otml.cli.commands.check import check_command
from otml.cli.commands.export import export_command
from otml.cli.commands.fmt import fmt_command
from otml.cli.commands.get import get_command
from otml.cli.commands.stats import stats_command

app = typer.Typer(
    name="otml",
    help="OTML parser, formatter, inspector and exporter",
    add_completion=False,
)


app.command("check")(check_command)
app.command("fmt")(fmt_command)
app.command("stats")(stats_command)
app.command("export")(export_command)
app.command("get")(get_command)


def main():
    app()


if __name__ == "__main__":
    main()
