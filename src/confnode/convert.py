"""Conversion of textual override and default values into typed values.

Environment variables and ``default`` annotations are always strings.  The
functions here turn them into the primitive kind declared by the schema
field.  Parsing follows base-10 decimal rules for numbers and the usual
``1/0``, ``t/f``, ``true/false`` forms for booleans.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Union

from .utils.errors import ConversionError, UnsupportedKindError

Value = Union[str, int, float, bool, None]


class Kind(Enum):
    """Kinds a schema field can have."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRUCT = "struct"
    OTHER = "other"


ZERO_VALUES: dict[Kind, Value] = {
    Kind.STRING: "",
    Kind.INT: 0,
    Kind.FLOAT: 0.0,
    Kind.BOOL: False,
}

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(text: str) -> int:
    if _INT_RE.fullmatch(text) is None:
        raise ConversionError(text, Kind.INT)
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ConversionError(text, Kind.INT)
    return value


def parse_float(text: str) -> float:
    if _FLOAT_RE.fullmatch(text) is None:
        raise ConversionError(text, Kind.FLOAT)
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        # out of range, e.g. "1e999"
        raise ConversionError(text, Kind.FLOAT)
    return value


def parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConversionError(text, Kind.BOOL)


def get_typed_value(source: str, kind: Kind) -> Value:
    """Convert ``source`` into a value of ``kind``.

    Parameters
    ----------
    source:
        Raw text taken from the environment or a ``default`` annotation.
    kind:
        Declared kind of the target field.

    Raises
    ------
    ConversionError
        If ``source`` is not a valid literal for a numeric or boolean kind.
    UnsupportedKindError
        If ``kind`` is not one of the four primitive kinds.
    """

    if kind is Kind.STRING:
        return source
    if kind is Kind.INT:
        return parse_int(source)
    if kind is Kind.FLOAT:
        return parse_float(source)
    if kind is Kind.BOOL:
        return parse_bool(source)
    raise UnsupportedKindError(kind)


def is_zero(value: Any, kind: Kind | None) -> bool:
    """Return ``True`` when ``value`` is absent or the zero value of ``kind``."""

    if value is None:
        return True
    if kind not in ZERO_VALUES:
        return False
    zero = ZERO_VALUES[kind]
    return type(value) is type(zero) and value == zero


__all__ = [
    "Value",
    "Kind",
    "ZERO_VALUES",
    "INT_MIN",
    "INT_MAX",
    "parse_int",
    "parse_float",
    "parse_bool",
    "get_typed_value",
    "is_zero",
]
