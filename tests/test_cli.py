# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from otml.cli import app
from otml.utils import mock_file_path

runner = CliRunner()


def test_check_ok() -> None:
    result = runner.invoke(app, ["check", str(mock_file_path("server.otml"))])
    assert result.exit_code == 0
    assert "OK" in result.output


def test_check_reports_failure() -> None:
    result = runner.invoke(
        app,
        ["check", str(mock_file_path("server.otml")), str(mock_file_path("tab_indent.otml"))],
    )
    assert result.exit_code == 1
    assert "FAIL" in result.output
    assert "at line 3" in result.output


def test_fmt_to_stdout() -> None:
    result = runner.invoke(app, ["fmt", str(mock_file_path("canonical.otml"))])
    assert result.exit_code == 0
    assert result.output == mock_file_path("canonical.otml").read_text(encoding="utf-8")


def test_fmt_check_canonical_and_not(tmp_path: Path) -> None:
    ok = runner.invoke(app, ["fmt", "--check", str(mock_file_path("canonical.otml"))])
    assert ok.exit_code == 0

    messy = tmp_path / "messy.otml"
    messy.write_text("// comment\na:   1\n\nb\n", encoding="utf-8")
    result = runner.invoke(app, ["fmt", "--check", str(messy)])
    assert result.exit_code == 1
    assert "would reformat" in result.output


def test_fmt_to_file(tmp_path: Path) -> None:
    src = tmp_path / "in.otml"
    src.write_text("a:   1\n// gone\nb:\n  - x\n", encoding="utf-8")
    out = tmp_path / "out.otml"

    result = runner.invoke(app, ["fmt", str(src), "--out", str(out)])

    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8") == "a: 1\nb:\n  - x\n"


def test_fmt_parse_error_exit_code() -> None:
    result = runner.invoke(app, ["fmt", str(mock_file_path("tab_indent.otml"))])
    assert result.exit_code == 1


def test_stats_table() -> None:
    result = runner.invoke(app, ["stats", str(mock_file_path("canonical.otml"))])
    assert result.exit_code == 0
    assert "OTML Statistics" in result.output
    assert "Max depth" in result.output


def test_collect_stats_counts() -> None:
    from otml.cli.commands.stats import collect_stats
    from otml.tree.document import OTMLDocument

    doc = OTMLDocument.parse_string("a: 1\nl:\n  - x\n  - ~\nt: |\n  x\n  y\n")
    stats = collect_stats(doc)
    assert stats["nodes"] == 5
    assert stats["tagged"] == 3
    assert stats["untagged"] == 2
    assert stats["null"] == 1
    assert stats["unique"] == 3
    assert stats["block_values"] == 1
    assert stats["max_depth"] == 2


def test_export_json_stdout() -> None:
    result = runner.invoke(app, ["export", str(mock_file_path("canonical.otml"))])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["children"][0]["tag"] == "name"


def test_export_json_file(tmp_path: Path) -> None:
    out = tmp_path / "tree.json"
    result = runner.invoke(app, ["export", str(mock_file_path("canonical.otml")), "-o", str(out), "--pretty"])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["tag"] == "doc"


def test_get_typed_value() -> None:
    path = str(mock_file_path("server.otml"))

    assert runner.invoke(app, ["get", path, "server.port", "--type", "int"]).output == "8080\n"
    assert runner.invoke(app, ["get", path, "server.debug", "-t", "bool"]).output == "true\n"
    assert runner.invoke(app, ["get", path, "hosts.1"]).output == "beta.example.org\n"


def test_get_missing_with_and_without_default() -> None:
    path = str(mock_file_path("server.otml"))

    missing = runner.invoke(app, ["get", path, "server.nope"])
    assert missing.exit_code == 1

    defaulted = runner.invoke(app, ["get", path, "legacy", "--default", "none"])
    assert defaulted.exit_code == 0
    assert defaulted.output == "none\n"


def test_get_cast_failure() -> None:
    result = runner.invoke(app, ["get", str(mock_file_path("server.otml")), "server.host", "-t", "int"])
    assert result.exit_code == 2


def test_get_unknown_type() -> None:
    result = runner.invoke(app, ["get", str(mock_file_path("server.otml")), "server.host", "-t", "complex"])
    assert result.exit_code != 0


def test_help_lists_every_command() -> None:
    import otml.cli.app as app_module

    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for name in ("check", "fmt", "stats", "export", "get"):
        assert name in result.output
    assert not hasattr(app_module, "console")
