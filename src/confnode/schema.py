"""Field descriptors derived from pydantic schema models.

A schema is a pydantic ``BaseModel`` subclass.  Fields whose annotation is
another model are nested structures; everything else is a leaf.  Field
annotations are attached with :func:`setting`::

    class Server(BaseModel):
        host: str = setting('default:"localhost"')
        port: int = setting('yaml:"listen_port" env:"SERVER_PORT"')

:func:`describe` turns a model class into an ordered tuple of
:class:`FieldDescriptor` objects once, so the tree builder and the decoder
can walk the schema without inspecting pydantic internals themselves.
"""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, Field
from pydantic.fields import FieldInfo

from .convert import ZERO_VALUES, Kind
from .tag import Tag, parse_tag
from .utils.errors import SchemaTypeError

TAG_KEY = "tag"

_PRIMITIVE_KINDS: dict[Any, Kind] = {
    str: Kind.STRING,
    int: Kind.INT,
    float: Kind.FLOAT,
    bool: Kind.BOOL,
}
_CONTAINER_ORIGINS = (list, tuple, set, frozenset, dict)


def setting(tag: str = "", **kwargs: Any) -> Any:
    """Return a pydantic ``Field`` carrying the raw annotation ``tag``.

    Remaining keyword arguments are passed to :func:`pydantic.Field`.  A field
    declared without ``default``/``default_factory`` decodes to the zero value
    of its kind when the document omits it.
    """

    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[TAG_KEY] = tag
    return Field(json_schema_extra=extra, **kwargs)


def is_schema(obj: Any) -> bool:
    """Return ``True`` if ``obj`` is a pydantic model class."""

    return isinstance(obj, type) and issubclass(obj, BaseModel)


def field_key(name: str, tag: Tag) -> str:
    """Lookup key for a field: the ``yaml`` override or the normalized name."""

    if tag.key:
        return tag.key
    return name.replace("-", "_").lower()


def _unwrap_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def kind_of(annotation: Any) -> Kind:
    """Map a field annotation onto a :class:`Kind`."""

    annotation = _unwrap_optional(annotation)
    if is_schema(annotation):
        return Kind.STRUCT
    return _PRIMITIVE_KINDS.get(annotation, Kind.OTHER)


def _raw_tag(info: FieldInfo) -> str:
    extra = info.json_schema_extra
    if isinstance(extra, dict):
        raw = extra.get(TAG_KEY, "")
        if isinstance(raw, str):
            return raw
    return ""


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of one schema field.

    ``children`` is populated for nested models only.  ``has_default`` tells
    whether the model itself supplies a value when the document omits the
    field.
    """

    name: str
    kind: Kind
    tag: Tag
    annotation: Any
    has_default: bool = False
    children: tuple[FieldDescriptor, ...] = field(default=(), repr=False)

    @property
    def key(self) -> str:
        return field_key(self.name, self.tag)

    def read(self, instance: Any) -> Any:
        """Return this field's value on ``instance`` (``None`` when absent)."""

        if instance is None:
            return None
        return getattr(instance, self.name, None)

    def zero_value(self) -> Any:
        """Value a missing field decodes to."""

        if self.kind in ZERO_VALUES:
            return ZERO_VALUES[self.kind]
        origin = get_origin(_unwrap_optional(self.annotation))
        if origin in _CONTAINER_ORIGINS:
            return origin()
        return None


def describe(model: type[BaseModel]) -> tuple[FieldDescriptor, ...]:
    """Return descriptors for the fields of ``model`` in declaration order.

    Raises
    ------
    SchemaTypeError
        If ``model`` is not a model class or nests itself.
    """

    if not is_schema(model):
        raise SchemaTypeError(f"expected a pydantic model class but got {type_name(model)}")
    return _describe(model, ())


def _describe(model: type[BaseModel], seen: tuple[type, ...]) -> tuple[FieldDescriptor, ...]:
    if model in seen:
        raise SchemaTypeError(f"recursive schema: {model.__qualname__} contains itself")
    seen = seen + (model,)

    descriptors = []
    for name, info in model.model_fields.items():
        kind = kind_of(info.annotation)
        children: tuple[FieldDescriptor, ...] = ()
        if kind is Kind.STRUCT:
            children = _describe(_unwrap_optional(info.annotation), seen)
        descriptors.append(
            FieldDescriptor(
                name=name,
                kind=kind,
                tag=parse_tag(_raw_tag(info)),
                annotation=info.annotation,
                has_default=not info.is_required(),
                children=children,
            )
        )
    return tuple(descriptors)


def type_name(obj: Any) -> str:
    """Readable type description used in error messages."""

    if isinstance(obj, type):
        return f"class {obj.__qualname__}"
    return type(obj).__qualname__


__all__ = [
    "TAG_KEY",
    "FieldDescriptor",
    "setting",
    "is_schema",
    "field_key",
    "kind_of",
    "describe",
    "type_name",
]
