"""Size-accounting tree.

Two node shapes exist: leaves carry a size, containers carry children.
Every node states its shape through ``kind`` so consumers can dispatch on
a tag instead of on class identity.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, List, Union


class NodeKind(Enum):
    LEAF = "leaf"
    CONTAINER = "container"


@dataclass(frozen=True)
class LeafMember:
    """A field, method or property with its computed size."""

    kind: ClassVar[NodeKind] = NodeKind.LEAF

    name: str
    size: int


@dataclass(frozen=True)
class TypeNode:
    """A declared type.

    ``children`` interleaves kinds in a fixed order: fields, methods,
    properties, then nested types. ``namespace`` is the type's own
    declared namespace (empty for nested types) and ``index`` its
    declaration position; neither is part of the serialized tree.
    """

    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    name: str
    children: List["Member"] = field(default_factory=list)
    namespace: str = ""
    index: int = 0

    @property
    def members(self) -> List[LeafMember]:
        """Direct leaf members, nested types excluded."""
        return [c for c in self.children if c.kind is NodeKind.LEAF]

    @property
    def nested_types(self) -> List["TypeNode"]:
        return [c for c in self.children if c.kind is NodeKind.CONTAINER]


Member = Union[LeafMember, TypeNode]


@dataclass(frozen=True)
class NamespaceNode:
    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    name: str
    children: List[TypeNode] = field(default_factory=list)


@dataclass(frozen=True)
class ModuleNode:
    """Root of the tree; ``name`` is the bracketed module identity."""

    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    name: str
    children: List[NamespaceNode] = field(default_factory=list)


Node = Union[LeafMember, TypeNode, NamespaceNode, ModuleNode]


def iter_types(node: Node) -> Iterator[TypeNode]:
    """Yield every TypeNode below ``node`` depth-first, nested types included."""
    if node.kind is NodeKind.LEAF:
        return
    if isinstance(node, TypeNode):
        yield node
    for child in node.children:
        yield from iter_types(child)


def total_size(node: Node) -> int:
    """Sum of all leaf sizes below ``node``."""
    if node.kind is NodeKind.LEAF:
        return node.size
    return sum(total_size(child) for child in node.children)
