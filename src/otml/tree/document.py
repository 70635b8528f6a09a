"""
document.py
OTMLDocument: the root of a parsed or freshly built tree.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO, Union

from otml.core.exceptions import ParseError
from otml.logging import get_logger
from otml.loader.tokenizer import split_lines

from .node import OTMLNode

log = get_logger(__name__)

DOCUMENT_TAG = "doc"


class OTMLDocument(OTMLNode):
    """
    Root node bound to a source label (file path or caller-given name).

    The document owns the whole tree below it. Its ``source`` is used as
    the prefix of every parsed node's locator and in parse diagnostics.
    """

    def __init__(self, source: str = "") -> None:
        super().__init__(tag=DOCUMENT_TAG, source=source)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------
    @classmethod
    def create(cls) -> "OTMLDocument":
        """An empty document with no source."""
        return cls()

    @classmethod
    def parse(cls, lines: Iterable[str], source: str = "") -> "OTMLDocument":
        """
        Parse any iterable of text lines (an open file, a list, ...).

        Raises ParseError on the first structural problem; nothing of the
        partially built tree is returned.
        """
        if isinstance(lines, str):
            raise TypeError("parse() takes an iterable of lines; use parse_string() for text")

        from otml.loader.parser import OTMLParser

        doc = cls(source=source)
        OTMLParser(doc, lines).parse()
        return doc

    @classmethod
    def parse_string(cls, text: str, source: str = "<string>") -> "OTMLDocument":
        return cls.parse(split_lines(text), source=source)

    @classmethod
    def parse_file(cls, path: Union[str, Path]) -> "OTMLDocument":
        file_path = Path(path)
        log.debug("Loading OTML file: %s", file_path)

        try:
            with file_path.open("r", encoding="utf-8", newline="") as f:
                return cls.parse(f, source=str(path))
        except OSError as exc:
            raise ParseError("cannot read from input stream", source=str(path)) from exc

    # ---------------------------------------------------------
    # Output
    # ---------------------------------------------------------
    def emit(self) -> str:
        """Canonical text of every top-level node, newline-joined."""
        from otml.exporter.emitter import emit_node

        return emit_node(self)

    def save(self, destination: Union[str, Path, TextIO]) -> bool:
        """
        Write the canonical text to a path or an open text stream.

        Returns False (after logging) when the destination cannot be
        opened or written. Saving to a path rebinds the document source.
        """
        text = self.emit() + "\n"

        if hasattr(destination, "write"):
            try:
                destination.write(text)  # type: ignore[union-attr]
            except OSError:
                log.exception("Failed to write OTML document to stream")
                return False
            return True

        path = Path(destination)  # type: ignore[arg-type]
        try:
            with path.open("w", encoding="utf-8") as f:
                f.write(text)
        except OSError as exc:
            log.error("Failed to save OTML document to %s: %s", path, exc)
            return False

        self.source = str(destination)
        log.info("Saved OTML document to %s (%d bytes)", path, len(text.encode("utf-8")))
        return True
