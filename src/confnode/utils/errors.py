"""Typed exceptions for schema loading, value conversion and key lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..convert import Kind


class ConfigError(Exception):
    """Base class for configuration related errors."""


class SchemaTypeError(ConfigError, TypeError):
    """Raised when ``load`` receives something that is not a model class."""


class DecodeError(ConfigError, ValueError):
    """Raised when the YAML document cannot be decoded into the schema."""


class ConversionError(ConfigError, ValueError):
    """Raised when an environment or default string cannot be parsed."""

    def __init__(self, value: str, kind: Kind) -> None:
        self.value = value
        self.kind = kind
        super().__init__(f'cannot convert "{value}" to {kind.value}')


class UnsupportedKindError(ConfigError, TypeError):
    """Raised when a field kind has no string conversion."""

    def __init__(self, kind: Kind) -> None:
        self.kind = kind
        super().__init__(f"no conversion available for this kind: {kind.value}")


class KeyNotFoundError(ConfigError, KeyError):
    """Raised when ``set`` targets a dotted path with no matching node."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"key not found: {key}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


__all__ = [
    "ConfigError",
    "SchemaTypeError",
    "DecodeError",
    "ConversionError",
    "UnsupportedKindError",
    "KeyNotFoundError",
]
