"""Load YAML into pydantic schemas and look values up by dotted path."""

import logging

from .config import ROOT_NAME, Configuration, load, load_file
from .convert import Kind, get_typed_value
from .node import Node
from .schema import FieldDescriptor, describe, setting
from .tag import Tag, normalize_env_key, parse_tag
from .utils.errors import (
    ConfigError,
    ConversionError,
    DecodeError,
    KeyNotFoundError,
    SchemaTypeError,
    UnsupportedKindError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "ROOT_NAME",
    "Configuration",
    "load",
    "load_file",
    "Kind",
    "get_typed_value",
    "Node",
    "FieldDescriptor",
    "describe",
    "setting",
    "Tag",
    "normalize_env_key",
    "parse_tag",
    "ConfigError",
    "ConversionError",
    "DecodeError",
    "KeyNotFoundError",
    "SchemaTypeError",
    "UnsupportedKindError",
]
