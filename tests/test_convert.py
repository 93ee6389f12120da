"""Tests for string to typed value conversion."""

from __future__ import annotations

import math

import pytest

from confnode.convert import Kind, get_typed_value, is_zero
from confnode.utils.errors import ConversionError, UnsupportedKindError


@pytest.mark.parametrize(
    ("value", "kind", "expected"),
    [
        ("test", Kind.STRING, "test"),
        ("", Kind.STRING, ""),
        ("1", Kind.INT, 1),
        ("-42", Kind.INT, -42),
        ("+7", Kind.INT, 7),
        ("1.1", Kind.FLOAT, 1.1),
        ("3", Kind.FLOAT, 3.0),
        ("2.5e3", Kind.FLOAT, 2500.0),
        ("true", Kind.BOOL, True),
        ("T", Kind.BOOL, True),
        ("1", Kind.BOOL, True),
        ("FALSE", Kind.BOOL, False),
        ("f", Kind.BOOL, False),
        ("0", Kind.BOOL, False),
    ],
)
def test_conversion_success(value: str, kind: Kind, expected: object) -> None:
    result = get_typed_value(value, kind)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ("not_int", Kind.INT),
        ("1.5", Kind.INT),
        (" 1", Kind.INT),
        ("1_000", Kind.INT),
        ("", Kind.INT),
        ("not_float", Kind.FLOAT),
        ("1e999", Kind.FLOAT),
        ("not_bool", Kind.BOOL),
        ("yes", Kind.BOOL),
        ("tRUE", Kind.BOOL),
    ],
)
def test_conversion_failure(value: str, kind: Kind) -> None:
    with pytest.raises(ConversionError) as excinfo:
        get_typed_value(value, kind)
    assert excinfo.value.value == value
    assert excinfo.value.kind is kind


def test_special_floats() -> None:
    assert math.isinf(get_typed_value("-Inf", Kind.FLOAT))
    assert math.isnan(get_typed_value("NaN", Kind.FLOAT))


@pytest.mark.parametrize("kind", [Kind.STRUCT, Kind.OTHER])
def test_unsupported_kind(kind: Kind) -> None:
    with pytest.raises(UnsupportedKindError, match="no conversion available"):
        get_typed_value("anything", kind)


def test_is_zero() -> None:
    assert is_zero(None, Kind.INT)
    assert is_zero("", Kind.STRING)
    assert is_zero(0, Kind.INT)
    assert is_zero(0.0, Kind.FLOAT)
    assert is_zero(False, Kind.BOOL)
    assert not is_zero("x", Kind.STRING)
    assert not is_zero(True, Kind.BOOL)
    assert not is_zero([], Kind.OTHER)


def test_int_range_is_64_bit() -> None:
    assert get_typed_value("9223372036854775807", Kind.INT) == 2**63 - 1
    assert get_typed_value("-9223372036854775808", Kind.INT) == -(2**63)
    for text in ("9223372036854775808", "-9223372036854775809"):
        with pytest.raises(ConversionError):
            get_typed_value(text, Kind.INT)
