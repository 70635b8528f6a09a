"""
emitter.py
Canonical text form of an OTML tree.

The output is the parser's inverse: feeding it back through the parser
rebuilds an equal tree for every value the grammar can express.

Layout per node, at ``depth`` >= 0:

    <2*depth spaces><tag>[:] [~ | value | block marker]
    <2*(depth+1) spaces><block line>...
    <children at depth+1>

At depth -1 (a document root) the node has no line of its own and only its
children are written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from otml.logging import get_logger

if TYPE_CHECKING:
    from otml.tree.node import OTMLNode

log = get_logger(__name__)

INDENT = "  "


def block_marker(value: str) -> str:
    """Pick the block style that reproduces the value's trailing newlines."""
    if value.endswith("\n\n"):
        return "|+"
    if value.endswith("\n"):
        return "|"
    return "|-"


def block_lines(value: str) -> List[str]:
    lines = value.split("\n")
    if value.endswith("\n"):
        lines.pop()
    return lines


def _node_line(node: "OTMLNode", depth: int) -> str:
    indent = INDENT * depth
    parts = [indent]

    if node.has_tag():
        parts.append(node.tag)
        if node.has_value() or node.unique or node.null:
            parts.append(":")
    else:
        parts.append("-")

    if node.null:
        parts.append(" ~")
    elif node.has_value():
        value = node.value
        if "\n" in value:
            parts.append(" " + block_marker(value))
            body_indent = INDENT * (depth + 1)
            for body_line in block_lines(value):
                parts.append("\n" + body_indent + body_line)
        else:
            parts.append(" " + value)

    return "".join(parts)


def emit_node(node: "OTMLNode", depth: int = -1) -> str:
    """Render ``node`` and its subtree; depth -1 skips the node's own line."""
    chunks: List[str] = []
    if depth >= 0:
        chunks.append(_node_line(node, depth))
    else:
        log.debug("Emitting OTML tree: %d top-level nodes", node.size)

    for index in range(node.size):
        chunks.append(emit_node(node.at_index(index), depth + 1))

    return "\n".join(chunks)
