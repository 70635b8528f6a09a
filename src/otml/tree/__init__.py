"""
Tree layer: the node model and the document root.
"""

from __future__ import annotations

from .node import OTMLNode
from .document import DOCUMENT_TAG, OTMLDocument

__all__ = [
    "OTMLNode",
    "OTMLDocument",
    "DOCUMENT_TAG",
]
