"""
json_exporter.py
Structured JSON export of an OTML tree.

Each node becomes one object:

    {"tag": ..., "value": ..., "unique": ..., "null": ..., "source": ...,
     "children": [...]}

Null nodes are kept (with ``"value": null``) so the export shows the tree
exactly as stored, index positions included.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from otml.logging import get_logger

if TYPE_CHECKING:
    from otml.tree.node import OTMLNode

log = get_logger("json_exporter")


def node_to_dict(node: "OTMLNode") -> Dict[str, Any]:
    """Recursively convert a node into a JSON-compatible dict."""
    return {
        "tag": node.tag or None,
        "value": None if node.null else node.value,
        "unique": node.unique,
        "null": node.null,
        "source": node.source or None,
        "children": [node_to_dict(node.at_index(i)) for i in range(node.size)],
    }


def serialize_tree_to_json_string(node: "OTMLNode", indent: int | None = 2) -> str:
    return json.dumps(
        node_to_dict(node),
        indent=indent,
        ensure_ascii=False,
    )


def export_tree_json(node: "OTMLNode", output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    count = sum(1 for _ in node.iter_subtree())
    log.info("Exporting OTML tree JSON to: %s (nodes=%d)", output_path, count)

    json_str = serialize_tree_to_json_string(node, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
