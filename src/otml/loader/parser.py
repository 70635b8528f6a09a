"""
parser.py
Indentation-driven parser: text lines -> OTML node tree.

The parser walks the input once, line by line, tracking the current depth
(one level per two leading spaces), the node that receives new children
and the last node created. A line one level deeper than the previous one
opens that previous node; a shallower line climbs back up through parent
links. Block scalars (``|``, ``|-``, ``|+``) swallow the deeper lines that
follow them and hand back the first line that is not part of the block.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from otml.core.exceptions import ParseError
from otml.logging import get_logger
from otml.tree.node import OTMLNode

from .tokenizer import INDENT_WIDTH, Line, LineReader, line_depth

if TYPE_CHECKING:
    from otml.tree.document import OTMLDocument

COMMENT_MARKER = "//"
SEQUENCE_MARKER = "-"
NULL_MARKER = "~"
BLOCK_KEEP = "|+"
BLOCK_STRIP = "|-"
BLOCK_CLIP = "|"
BLOCK_MARKERS = (BLOCK_CLIP, BLOCK_STRIP, BLOCK_KEEP)


class OTMLParser:
    """
    Single-pass parser filling an OTMLDocument.

    Usage:
        parser = OTMLParser(doc, lines)
        parser.parse()
    """

    def __init__(self, doc: "OTMLDocument", lines: Iterable[str]):
        self.doc = doc
        self.reader = LineReader(lines)
        self.log = get_logger(__name__)

        self.current_depth = 0
        self.current_parent: OTMLNode = doc
        self.previous_node: Optional[OTMLNode] = None

    # ---------------------------------------------------------
    # Driver
    # ---------------------------------------------------------
    def parse(self) -> "OTMLDocument":
        self.log.debug("Parsing OTML input: %s", self.doc.source)

        try:
            for line in self.reader:
                self._parse_line(line)
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseError("cannot read from input stream", source=self.doc.source) from exc

        self.log.debug(
            "Parsed %s: %d lines, %d top-level nodes",
            self.doc.source,
            self.reader.lineno,
            self.doc.size,
        )
        return self.doc

    def _error(self, message: str, lineno: int) -> ParseError:
        return ParseError(message, source=self.doc.source, line=lineno)

    # ---------------------------------------------------------
    # Per-line handling
    # ---------------------------------------------------------
    def _parse_line(self, line: Line) -> None:
        depth = line_depth(line, self.doc.source)

        text = line.text
        if not text or text.startswith(COMMENT_MARKER):
            return

        if depth == self.current_depth + 1:
            if self.previous_node is None:
                raise self._error("invalid indentation depth, are you indenting correctly?", line.lineno)
            self.current_parent = self.previous_node
        elif depth < self.current_depth:
            for _ in range(self.current_depth - depth):
                parent = self.current_parent.parent
                if parent is None:
                    raise self._error("invalid indentation depth, are you indenting correctly?", line.lineno)
                self.current_parent = parent
        elif depth != self.current_depth:
            raise self._error("invalid indentation depth, are you indenting correctly?", line.lineno)

        self.current_depth = depth
        self._parse_node(text, line.lineno)

    def _parse_node(self, text: str, lineno: int) -> None:
        tag = ""
        value = ""
        unique = False

        if text.startswith(SEQUENCE_MARKER):
            value = text[len(SEQUENCE_MARKER):].strip()
        elif ":" in text:
            tag, _, value = text.partition(":")
            tag = tag.strip()
            value = value.strip()
            unique = True
        else:
            tag = text

        node = OTMLNode(tag=tag, unique=unique, source=f"{self.doc.source}:{lineno}")

        if value in BLOCK_MARKERS:
            node.value = self._read_block(value)
        elif value == NULL_MARKER:
            node.null = True
        else:
            node.value = value

        self.current_parent.add_child(node)
        self.previous_node = node

    # ---------------------------------------------------------
    # Block scalars
    # ---------------------------------------------------------
    def _read_block(self, marker: str) -> str:
        """
        Collect the lines nested under a block-scalar marker.

        Each deeper line loses exactly the indentation of the block level and
        keeps the rest verbatim. Blank lines count as empty body lines. The
        first non-blank line at or above the owner's depth ends the block
        and is pushed back for normal processing.
        """
        prefix = (self.current_depth + 1) * INDENT_WIDTH
        body = []

        while True:
            line = self.reader.next_line()
            if line is None:
                break

            depth = line_depth(line, self.doc.source, checked=False)
            if depth > self.current_depth:
                body.append(line.raw[prefix:])
                continue

            line_depth(line, self.doc.source)
            if not line.is_blank:
                self.reader.push_back(line)
                break
            body.append("")

        data = "".join(part + "\n" for part in body)

        if marker == BLOCK_STRIP:
            return data.rstrip("\n")
        if marker == BLOCK_CLIP:
            return data.rstrip("\n") + "\n"
        return data
