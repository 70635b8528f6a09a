# tests/test_document.py

from __future__ import annotations

import io
from pathlib import Path

import pytest

from otml.core.exceptions import ParseError
from otml.tree.document import DOCUMENT_TAG, OTMLDocument
from otml.tree.node import OTMLNode
from otml.utils import mock_file_path


def test_create_is_empty_doc() -> None:
    doc = OTMLDocument.create()
    assert doc.tag == DOCUMENT_TAG == "doc"
    assert doc.size == 0
    assert doc.source == ""


def test_parse_binds_source() -> None:
    doc = OTMLDocument.parse(["a: 1\n"], source="memory")
    assert doc.tag == "doc"
    assert doc.source == "memory"
    assert doc.at("a").source == "memory:1"


def test_parse_defaults_to_empty_source() -> None:
    doc = OTMLDocument.parse(["a: 1"])
    assert doc.source == ""
    assert doc.at("a").source == ":1"


def test_parse_rejects_plain_string() -> None:
    with pytest.raises(TypeError, match="parse_string"):
        OTMLDocument.parse("a: 1\nb: 2\n")


def test_parse_accepts_text_stream() -> None:
    doc = OTMLDocument.parse(io.StringIO("a: 1\nb:\n  - x\n"), source="stream")
    assert doc.find("b.0").value == "x"


def test_parse_file_mock_server() -> None:
    path = mock_file_path("server.otml")
    doc = OTMLDocument.parse_file(path)

    assert doc.source == str(path)
    server = doc.at("server")
    assert server.value_at("host") == "localhost"
    assert server.value_at("port", int) == 8080
    assert server.value_at("debug", bool) is True
    assert server.value_at("ratio", float) == 0.75
    assert [c.value for c in doc.at("hosts").children()] == [
        "alpha.example.org",
        "beta.example.org",
    ]
    assert doc.value_at("motd") == "Welcome to the server.\nBe nice.\n"
    assert doc.value_at("banner") == "line one\nline two"
    assert doc.value_at("footer") == "keep this\n\n"
    assert doc.get("legacy") is None
    assert doc.value_at("legacy", str, "fallback") == "fallback"

    window = doc.at("window")
    assert not window.unique
    assert window.value_at("size") == "800 600"
    assert window.value_at_index(1) == "fullscreen"


def test_parse_file_tab_indent_fails() -> None:
    path = mock_file_path("tab_indent.otml")
    with pytest.raises(ParseError) as excinfo:
        OTMLDocument.parse_file(path)
    assert excinfo.value.line == 3
    assert excinfo.value.source == str(path)


def test_parse_file_missing_is_parse_error(tmp_path: Path) -> None:
    missing = tmp_path / "nope.otml"
    with pytest.raises(ParseError) as excinfo:
        OTMLDocument.parse_file(missing)
    assert "cannot read from input stream" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_parse_file_undecodable_is_parse_error(tmp_path: Path) -> None:
    bad = tmp_path / "bad.otml"
    bad.write_bytes(b"a: \xff\xfe\n")
    with pytest.raises(ParseError):
        OTMLDocument.parse_file(bad)


def test_parse_file_handles_crlf(tmp_path: Path) -> None:
    path = tmp_path / "crlf.otml"
    path.write_bytes(b"a: 1\r\nb:\r\n  - x\r\n")
    doc = OTMLDocument.parse_file(path)
    assert doc.value_at("a") == "1"
    assert doc.find("b.0").value == "x"


def test_save_and_reload(tmp_path: Path) -> None:
    doc = OTMLDocument.create()
    doc.write_at("name", "demo")
    doc.write_at("text", "l1\nl2\n")
    target = tmp_path / "out.otml"

    assert doc.save(target) is True
    assert doc.source == str(target)
    assert target.read_text(encoding="utf-8") == "name: demo\ntext: |\n  l1\n  l2\n"

    again = OTMLDocument.parse_file(target)
    assert again == doc


def test_save_to_stream() -> None:
    doc = OTMLDocument.create()
    doc.write_in("x")
    buffer = io.StringIO()
    assert doc.save(buffer) is True
    assert buffer.getvalue() == "- x\n"


def test_save_failure_returns_false(tmp_path: Path) -> None:
    doc = OTMLDocument.create()
    doc.write_at("a", 1)
    target = tmp_path / "missing_dir" / "out.otml"
    assert doc.save(target) is False
    assert doc.source == ""


def test_clone_of_document_is_plain_node() -> None:
    doc = OTMLDocument.parse_string("a: 1\n")
    copy = doc.clone()
    assert type(copy) is OTMLNode
    assert copy.value_at("a", int) == 1


def test_merge_documents() -> None:
    base = OTMLDocument.parse_string("host: a\nport: 1\n", source="base")
    override = OTMLDocument.parse_string("port: 2\n", source="override")
    base.merge(override)
    assert base.value_at("port", int) == 2
    assert base.value_at("host") == "a"
    assert base.source == "override"
