# src/otml/loader/__init__.py

"""
Public interface for the OTML loader stack.

    from otml.loader import (
        Line,
        LineReader,
        OTMLParser,
        line_depth,
        split_lines,
    )
"""

from __future__ import annotations

from .tokenizer import INDENT_WIDTH, Line, LineReader, line_depth, split_lines
from .parser import OTMLParser

__all__ = [
    "INDENT_WIDTH",
    "Line",
    "LineReader",
    "OTMLParser",
    "line_depth",
    "split_lines",
]
