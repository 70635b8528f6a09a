# tests/test_conversion.py

from __future__ import annotations

from decimal import Decimal

import pytest

from otml.conversion import FALSE_TOKENS, TRUE_TOKENS, from_text, to_text
from otml.core.exceptions import CastError


@pytest.mark.parametrize("token", ["true", "yes", "on", "1"])
def test_bool_true_tokens(token: str) -> None:
    assert from_text(token, bool) is True


@pytest.mark.parametrize("token", ["false", "no", "off", "0"])
def test_bool_false_tokens(token: str) -> None:
    assert from_text(token, bool) is False


@pytest.mark.parametrize("token", ["True", "YES", "On", "2", "", " true", "y", "n"])
def test_bool_rejects_everything_else(token: str) -> None:
    with pytest.raises(CastError):
        from_text(token, bool)


def test_bool_token_tables_are_disjoint() -> None:
    assert not set(TRUE_TOKENS) & set(FALSE_TOKENS)


def test_bool_to_text() -> None:
    assert to_text(True) == "true"
    assert to_text(False) == "false"


def test_string_is_identity() -> None:
    assert from_text("  padded value ", str) == "  padded value "
    assert from_text("", str) == ""
    assert to_text("abc") == "abc"


def test_int_round_trip() -> None:
    assert from_text("42", int) == 42
    assert from_text("-7", int) == -7
    assert to_text(42) == "42"


@pytest.mark.parametrize("text", ["", "4.2", "12abc", " 12", "12 ", "1_000", "0x10"])
def test_int_must_consume_whole_text(text: str) -> None:
    with pytest.raises(CastError):
        from_text(text, int)


def test_float_conversion() -> None:
    assert from_text("0.75", float) == 0.75
    assert from_text("1e3", float) == 1000.0
    assert to_text(0.5) == "0.5"


@pytest.mark.parametrize("text", ["", "abc", " 1.5", "1.5 ", "1_0.5"])
def test_float_rejects_partial_text(text: str) -> None:
    with pytest.raises(CastError):
        from_text(text, float)


def test_other_types_use_their_constructor() -> None:
    assert from_text("1.25", Decimal) == Decimal("1.25")
    with pytest.raises(CastError):
        from_text("not-a-number", Decimal)


def test_none_cannot_be_written() -> None:
    with pytest.raises(CastError):
        to_text(None)


def test_cast_error_message_has_prefix() -> None:
    with pytest.raises(CastError) as excinfo:
        from_text("maybe", bool)
    assert str(excinfo.value).startswith("OTML error: ")
