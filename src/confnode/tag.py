"""Parsing of field annotation strings.

A field annotation is a space separated list of tokens, each either a bare
``key`` or ``key:"value"``::

    yaml:"listen_port" default:"8080" env:"app.port" required

Recognised keys are ``yaml`` (lookup key), ``default``, ``env`` and
``required``.  Anything else is kept in :attr:`Tag.store` but otherwise
unused.  Parsing never fails; malformed tokens end up with empty values.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field

ASSIGN_CHAR = ":"
QUOTE_CHAR = '"'
SEPARATOR_CHAR = " "

_NON_ALNUM = re.compile(r"[^A-Z0-9]+")
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


@dataclass
class Tag:
    """Parsed field annotation."""

    default: str = ""
    key: str = ""
    required: bool = False  # parsed, not enforced
    env: str = ""
    store: dict[str, str] = field(default_factory=dict, repr=False)

    def has(self, name: str) -> bool:
        return name in self.store

    def get(self, name: str) -> str:
        return self.store.get(name, "")


def normalize_env_key(env: str) -> str:
    """Return ``env`` as an upper-case environment variable name.

    Every run of characters outside ``A-Z0-9`` becomes a single underscore
    and leading/trailing underscores are removed, so ``"with%two%%symbols"``
    becomes ``"WITH_TWO_SYMBOLS"``.  Only ASCII letters are upper-cased; any
    other letter counts as a symbol.
    """

    # ASCII only: str.upper() would turn "ß" into "SS"
    return _NON_ALNUM.sub("_", env.translate(_ASCII_UPPER)).strip("_")


def parse_tag(raw: str) -> Tag:
    """Parse the raw annotation string ``raw`` into a :class:`Tag`."""

    tag = Tag()
    for element in raw.split(SEPARATOR_CHAR):
        if not element:
            continue
        name, sep, value = element.partition(ASSIGN_CHAR)
        if not sep:
            tag.store[element] = ""
            continue
        tag.store[name] = value.strip(QUOTE_CHAR)

    tag.required = tag.has("required")
    tag.default = tag.get("default")
    tag.key = tag.get("yaml")
    env = tag.get("env")
    if env:
        tag.env = normalize_env_key(env)
    return tag


__all__ = [
    "ASSIGN_CHAR",
    "QUOTE_CHAR",
    "SEPARATOR_CHAR",
    "Tag",
    "normalize_env_key",
    "parse_tag",
]
