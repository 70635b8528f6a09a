"""
conversion.py
Text <-> typed value conversion for node values.

Node values are always stored as text. Reading converts that text into a
requested Python type; writing formats a Python value into its canonical
text. The rules:

- ``str``   : identity in both directions.
- ``bool``  : reads ``true|yes|on|1`` / ``false|no|off|0`` (case-sensitive),
              writes ``true`` / ``false``.
- ``int``   : decimal digits with an optional sign, nothing else.
- ``float`` : Python's float syntax, without surrounding whitespace.
- anything else: ``target(text)``; any ValueError, TypeError or
              ArithmeticError it raises is a failure.

Every failure is reported as CastError.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Type, TypeVar

from otml.core.exceptions import CastError

T = TypeVar("T")

TRUE_TOKENS = ("true", "yes", "on", "1")
FALSE_TOKENS = ("false", "no", "off", "0")

_INT_RE = re.compile(r"[+-]?\d+")


def _parse_str(text: str) -> str:
    return text


def _parse_bool(text: str) -> bool:
    if text in TRUE_TOKENS:
        return True
    if text in FALSE_TOKENS:
        return False
    raise CastError(f"failed to cast value {text!r} to bool")


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise CastError(f"failed to cast value {text!r} to int")
    return int(text)


def _parse_float(text: str) -> float:
    # float() tolerates padding and digit separators; the whole text must be the number.
    if text != text.strip() or "_" in text:
        raise CastError(f"failed to cast value {text!r} to float")
    try:
        return float(text)
    except ValueError:
        raise CastError(f"failed to cast value {text!r} to float") from None


_PARSERS: Dict[type, Callable[[str], Any]] = {
    str: _parse_str,
    bool: _parse_bool,
    int: _parse_int,
    float: _parse_float,
}


def from_text(text: str, target: Type[T] = str) -> T:  # type: ignore[assignment]
    """Convert stored node text into ``target``."""
    if not isinstance(text, str):
        raise CastError(f"expected text to convert, got {type(text).__name__}")

    parser = _PARSERS.get(target)
    if parser is not None:
        return parser(text)

    try:
        return target(text)  # type: ignore[call-arg]
    except (ValueError, TypeError, ArithmeticError) as exc:
        name = getattr(target, "__name__", repr(target))
        raise CastError(f"failed to cast value {text!r} to {name}") from exc


def to_text(value: Any) -> str:
    """Format a Python value into the canonical text stored on a node."""
    if value is None:
        raise CastError("cannot write None as a node value")
    # bool first: it is also an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return str(value)
