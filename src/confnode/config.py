"""Configuration facade: loading and dotted-path access.

:func:`load` decodes a YAML source into a schema model and builds the node
tree over the result.  :class:`Configuration` exposes lookup and mutation by
dotted path (``"http.server.host"``).

Getters never raise: unknown paths give ``None`` and the typed getters fall
back to the zero value when the stored value has another type.  ``set``
raises :class:`KeyNotFoundError` for unknown paths and performs no type
check against the field's declared kind.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .decode import Source, decode
from .node import Node, build_node
from .schema import describe, is_schema, type_name
from .utils.errors import KeyNotFoundError, SchemaTypeError
from .utils.logging import get_logger

ROOT_NAME = "Application"

logger = get_logger(__name__)


class Configuration:
    """Holds the root node of a loaded configuration tree."""

    def __init__(self, node: Node, schema: BaseModel | None = None) -> None:
        self.node = node
        self.schema = schema

    def get(self, key: str) -> Any:
        """Return the value at ``key`` or ``None`` if the path does not resolve."""

        context = self.node.find_node(key)
        if context is None:
            return None
        return context.value

    def get_string(self, key: str) -> str:
        value = self.get(key)
        if isinstance(value, str):
            return value
        return ""

    def get_int(self, key: str) -> int:
        value = self.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return 0

    def get_float(self, key: str) -> float:
        value = self.get(key)
        if isinstance(value, float):
            return value
        return 0.0

    def get_bool(self, key: str) -> bool:
        value = self.get(key)
        if isinstance(value, bool):
            return value
        return False

    def set(self, key: str, value: Any) -> None:
        """Overwrite the value at ``key``.

        Raises
        ------
        KeyNotFoundError
            If ``key`` does not resolve to a node.
        """

        context = self.node.find_node(key)
        if context is None:
            raise KeyNotFoundError(key)
        context.value = value
        logger.debug("set %s", key)

    def has(self, key: str) -> bool:
        return self.node.find_node(key) is not None

    def keys(self) -> list[str]:
        """Dotted paths of every leaf, in declaration order."""

        return [node.path for node in self.node.walk() if node.kind is not None]

    def as_dict(self) -> dict[str, Any]:
        return self.node.to_dict()


def load(
    schema: type[BaseModel],
    source: Source,
    *,
    env: Mapping[str, str] | None = None,
    strict: bool = False,
) -> Configuration:
    """Decode ``source`` into ``schema`` and build the configuration tree.

    Parameters
    ----------
    schema:
        Pydantic model class describing the document.
    source:
        YAML text, bytes or a readable stream.
    env:
        Environment used for ``env`` annotations; defaults to ``os.environ``.
        It is read once, while the tree is built.
    strict:
        Raise the first conversion failure instead of leaving the field
        unset.

    Raises
    ------
    SchemaTypeError
        If ``schema`` is not a pydantic model class.
    DecodeError
        If the YAML cannot be decoded into ``schema``.
    ConversionError, UnsupportedKindError
        Only with ``strict``, when an environment or default value cannot
        be converted.
    """

    if not is_schema(schema):
        raise SchemaTypeError(f"expected a pydantic model class but got {type_name(schema)}")

    descriptors = describe(schema)
    instance = decode(schema, source, descriptors)

    root = Node(name=ROOT_NAME)
    build_node(root, instance, descriptors, os.environ if env is None else env, strict)
    logger.debug("built configuration tree for %s", schema.__qualname__)
    return Configuration(root, instance)


def load_file(
    schema: type[BaseModel],
    path: str | os.PathLike[str],
    *,
    env: Mapping[str, str] | None = None,
    strict: bool = False,
) -> Configuration:
    """Load the YAML file at ``path``; see :func:`load`."""

    with Path(path).open("rb") as fh:
        return load(schema, fh, env=env, strict=strict)


__all__ = ["ROOT_NAME", "Configuration", "load", "load_file"]
