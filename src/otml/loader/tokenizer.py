# src/otml/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from otml.core.exceptions import ParseError

INDENT_WIDTH = 2


@dataclass(frozen=True)
class Line:
    """
    A single physical input line.

    Attributes:
        lineno: 1-based line number in the original input.
        raw: The line content without trailing newline characters.
    """
    lineno: int
    raw: str

    @property
    def text(self) -> str:
        """The line with surrounding whitespace removed."""
        return self.raw.strip()

    @property
    def is_blank(self) -> bool:
        return not self.raw.strip()


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def count_indent(raw: str) -> int:
    """Number of leading space characters."""
    return len(raw) - len(raw.lstrip(" "))


def line_depth(line: Line, source: str = "", checked: bool = True) -> int:
    """
    Return the indentation depth (one level per two leading spaces).

    With ``checked`` the indentation must be made of spaces only and be a
    multiple of two; a violation is a ParseError naming the line.
    """
    spaces = count_indent(line.raw)

    if checked:
        if line.raw[spaces:spaces + 1] == "\t":
            raise ParseError("indentation with tabs are not allowed", source=source, line=line.lineno)
        if spaces % INDENT_WIDTH != 0:
            raise ParseError(f"must indent every {INDENT_WIDTH} spaces", source=source, line=line.lineno)

    return spaces // INDENT_WIDTH


class LineReader:
    """
    Iterates numbered lines from any iterable of text lines.

    Keeps a lookahead buffer so a consumer can return a line it has read
    but does not want yet (``push_back``); the line counter follows.
    """

    def __init__(self, lines: Iterable[str]):
        self._source: Iterator[str] = iter(lines)
        self._pending: List[Line] = []
        self.lineno = 0

    def __iter__(self) -> "LineReader":
        return self

    def __next__(self) -> Line:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line

    def next_line(self) -> Optional[Line]:
        """Return the next line, or None at end of input."""
        if self._pending:
            line = self._pending.pop()
            self.lineno = line.lineno
            return line

        try:
            raw = next(self._source)
        except StopIteration:
            return None

        self.lineno += 1
        raw = _strip_eol(raw)

        # Handle optional UTF-8 BOM on the very first line.
        if self.lineno == 1 and raw.startswith("\ufeff"):
            raw = raw.lstrip("\ufeff")

        return Line(lineno=self.lineno, raw=raw)

    def peek(self) -> Optional[Line]:
        line = self.next_line()
        if line is not None:
            self.push_back(line)
        return line

    def push_back(self, line: Line) -> None:
        self._pending.append(line)
        self.lineno = line.lineno - 1


def split_lines(text: str) -> List[str]:
    """Split a whole document on newlines; a trailing newline adds no empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines
