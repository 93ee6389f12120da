"""YAML decoding into schema models.

The document is parsed with PyYAML and validated with pydantic.  Before
validation the document is re-keyed from lookup keys (``yaml`` override or
lower-cased field name) to field names, and fields the document omits are
filled with the zero value of their kind, so a partial document always
decodes into a fully populated model.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping, Sequence
from typing import IO, Any, Union

import yaml
from pydantic import BaseModel, ValidationError

from .convert import ZERO_VALUES, Kind
from .schema import FieldDescriptor, describe
from .utils.errors import DecodeError

Source = Union[str, bytes, IO[str], IO[bytes]]


def read_source(source: Source) -> str | bytes:
    """Return the text held by ``source`` (a string, bytes or stream)."""

    if isinstance(source, (str, bytes)):
        return source
    if hasattr(source, "read"):
        return source.read()
    raise DecodeError(f"cannot read YAML from {type(source).__qualname__}")


def parse_document(source: Source) -> Mapping[str, Any]:
    """Parse ``source`` as YAML and return the root mapping."""

    try:
        document = yaml.safe_load(read_source(source))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise DecodeError(str(exc)) from exc
    if document is None:
        return {}
    if not isinstance(document, Mapping):
        raise DecodeError(
            f"expected a mapping at the document root but got {type(document).__name__}"
        )
    return document


def scalar_text(raw: Any) -> Any:
    """Return the text form of a YAML scalar decoded into a string field.

    PyYAML has already resolved the scalar, so ``1.00`` comes back as ``"1.0"``.
    Non-scalars are returned unchanged for the model to reject.
    """

    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (int, float)):
        return str(raw)
    if isinstance(raw, datetime.date):
        return raw.isoformat()
    return raw


def map_fields(
    descriptors: Sequence[FieldDescriptor], document: Mapping[str, Any]
) -> dict[str, Any]:
    """Re-key ``document`` by field name, filling omitted fields with zero values."""

    data: dict[str, Any] = {}
    for descriptor in descriptors:
        if descriptor.key in document:
            raw = document[descriptor.key]
            if descriptor.kind is Kind.STRUCT:
                if raw is None:
                    raw = {}
                if isinstance(raw, Mapping):
                    raw = map_fields(descriptor.children, raw)
            elif raw is None and descriptor.kind in ZERO_VALUES:
                raw = ZERO_VALUES[descriptor.kind]
            elif descriptor.kind is Kind.STRING:
                raw = scalar_text(raw)
            data[descriptor.name] = raw
        elif not descriptor.has_default:
            if descriptor.kind is Kind.STRUCT:
                data[descriptor.name] = map_fields(descriptor.children, {})
            else:
                data[descriptor.name] = descriptor.zero_value()
    return data


def decode(
    model: type[BaseModel],
    source: Source,
    descriptors: Sequence[FieldDescriptor] | None = None,
) -> BaseModel:
    """Decode the YAML in ``source`` into an instance of ``model``.

    Raises
    ------
    DecodeError
        If the document is malformed or does not fit the model.
    """

    if descriptors is None:
        descriptors = describe(model)
    document = parse_document(source)
    try:
        return model.model_validate(map_fields(descriptors, document))
    except ValidationError as exc:
        raise DecodeError(str(exc)) from exc


__all__ = ["Source", "read_source", "parse_document", "scalar_text", "map_fields", "decode"]
