"""otml: parser, tree model and emitter for the OTML indentation format."""

from .core.exceptions import CastError, NotFound, OTMLError, ParseError
from .conversion import from_text, to_text
from .tree import OTMLDocument, OTMLNode
from .exporter import emit_node

__version__ = "1.0.0"

__all__ = [
    "OTMLDocument",
    "OTMLNode",
    "OTMLError",
    "ParseError",
    "NotFound",
    "CastError",
    "emit_node",
    "from_text",
    "to_text",
]
