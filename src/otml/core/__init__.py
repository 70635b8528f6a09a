"""
Core error types shared by the loader, tree and exporter layers.
"""

from .exceptions import CastError, NotFound, OTMLError, ParseError

__all__ = [
    "OTMLError",
    "ParseError",
    "NotFound",
    "CastError",
]
