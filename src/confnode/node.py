"""Configuration tree nodes and the tree builder.

Every schema field becomes one :class:`Node`.  Nested models become branch
nodes holding no value; everything else becomes a leaf whose value is
resolved, in order of precedence, from:

1. the environment variable named by the field's ``env`` annotation, when
   set and non-empty,
2. the decoded document,
3. the field's ``default`` annotation, when the value is still absent or the
   zero value of its kind.

The tree is not internally synchronized.  Callers sharing a configuration
between threads must guard ``set`` themselves.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .convert import Kind, get_typed_value, is_zero
from .schema import FieldDescriptor
from .tag import Tag
from .utils.errors import ConversionError, UnsupportedKindError
from .utils.logging import get_logger

PATH_SEPARATOR = "."

logger = get_logger(__name__)


@dataclass(eq=False)
class Node:
    """One field of the configuration tree.

    ``kind`` is set on leaves only.  ``parent`` is a back-reference; a node
    owns its ``children``.
    """

    name: str
    key: str = ""
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list, repr=False)
    kind: Kind | None = None
    value: Any = None
    tag: Tag = field(default_factory=Tag, repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children and self.kind is not None

    @property
    def path(self) -> str:
        """Dotted path from the root to this node (empty for the root)."""

        keys = []
        node: Node | None = self
        while node is not None and node.parent is not None:
            keys.append(node.key)
            node = node.parent
        return PATH_SEPARATOR.join(reversed(keys))

    def get_child(self, key: str) -> Node | None:
        for child in self.children:
            if child.key == key:
                return child
        return None

    def find_node(self, path: str) -> Node | None:
        """Return the node at dotted ``path`` below this one, or ``None``.

        Only a path that resolves completely returns a node.
        """

        context: Node | None = self
        for segment in path.split(PATH_SEPARATOR):
            context = context.get_child(segment)
            if context is None:
                return None
        return context

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first in declaration order."""

        for child in self.children:
            yield child
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        return {
            child.key: child.to_dict() if child.kind is None else child.value
            for child in self.children
        }

    def resolve(self, value: Any, env: Mapping[str, str]) -> None:
        """Resolve this leaf's value from ``env``, ``value`` and the default.

        On a conversion failure the exception propagates and ``value`` is
        left untouched.
        """

        kind = self.kind if self.kind is not None else Kind.OTHER
        if self.tag.env and env.get(self.tag.env):
            value = get_typed_value(env[self.tag.env], kind)
        if is_zero(value, kind) and self.tag.default:
            value = get_typed_value(self.tag.default, kind)
        self.value = value


def build_node(
    parent: Node,
    instance: Any,
    descriptors: Sequence[FieldDescriptor],
    env: Mapping[str, str],
    strict: bool = False,
) -> None:
    """Attach one child to ``parent`` per descriptor, recursing into models.

    Conversion failures leave the leaf value as ``None`` and are logged,
    unless ``strict`` is set, in which case the first one is raised.
    """

    for descriptor in descriptors:
        node = Node(name=descriptor.name, tag=descriptor.tag)

        if descriptor.kind is Kind.STRUCT:
            build_node(node, descriptor.read(instance), descriptor.children, env, strict)
        else:
            node.kind = descriptor.kind
            try:
                node.resolve(descriptor.read(instance), env)
            except (ConversionError, UnsupportedKindError) as exc:
                if strict:
                    raise
                logger.warning(
                    "could not resolve field %s as %s (%s)",
                    descriptor.name,
                    descriptor.kind.value,
                    type(exc).__name__,
                )

        node.key = descriptor.key
        node.parent = parent
        parent.children.append(node)


__all__ = ["PATH_SEPARATOR", "Node", "build_node"]
