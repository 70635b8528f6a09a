"""
Exporter package.

Canonical OTML text emission plus a JSON export of the node tree.
"""

from __future__ import annotations

from .emitter import emit_node
from .json_exporter import export_tree_json, node_to_dict, serialize_tree_to_json_string

__all__ = [
    "emit_node",
    "export_tree_json",
    "node_to_dict",
    "serialize_tree_to_json_string",
]
