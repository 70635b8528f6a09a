from __future__ import annotations

from typing import Optional


class OTMLError(Exception):
    """
    Base exception for every otml failure.

    The rendered message follows one fixed diagnostic format:

        OTML error[ in '<source>'][ at line <N>]: <message>

    The source and line parts appear only when they are known.
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        self.message = message
        self.source = source or None
        self.line = line if line is not None and line >= 0 else None
        super().__init__(self.format())

    def format(self) -> str:
        text = "OTML error"
        if self.source:
            text += f" in '{self.source}'"
        if self.line is not None:
            text += f" at line {self.line}"
        return f"{text}: {self.message}"


class ParseError(OTMLError, ValueError):
    """Raised when the input text breaks the indentation grammar or cannot be read."""


class NotFound(OTMLError, LookupError):
    """Raised by strict lookups when the requested child does not exist."""


class CastError(OTMLError, ValueError):
    """Raised when a value cannot be converted to or from its text form."""
