"""Build the namespace -> type -> member tree from a metadata snapshot."""

from typing import Dict, List, Set

from ..exceptions import MetadataResolutionError
from ..logging_config import get_logger
from ..metadata.models import ModuleMetadata, TypeDefinition
from .metric import leaf_size
from .models import LeafMember, Member, ModuleNode, NamespaceNode, TypeNode

logger = get_logger(__name__)

GLOBAL_NAMESPACE = "<global>"


def namespace_key(namespace: str) -> str:
    """Display key for a declared namespace; the empty namespace is ``<global>``."""
    return namespace if namespace else GLOBAL_NAMESPACE


class TreeBuilder:
    """Turns a ``ModuleMetadata`` snapshot into a ``ModuleNode``.

    Building is deterministic: children follow declaration order and
    namespaces follow first appearance. Malformed metadata aborts the
    build rather than producing a partial tree.
    """

    def __init__(self, metadata: ModuleMetadata):
        self.metadata = metadata
        self._built: Set[int] = set()

    def build(self) -> ModuleNode:
        self._built = set()
        namespaces: Dict[str, List[TypeNode]] = {}
        for type_def in self.metadata.top_level_types():
            key = namespace_key(type_def.namespace)
            namespaces.setdefault(key, []).append(self.build_type(type_def))

        module = ModuleNode(
            name=self.metadata.label,
            children=[NamespaceNode(name, types) for name, types in namespaces.items()],
        )
        unreachable = len(self.metadata.types) - len(self._built)
        if unreachable:
            raise MetadataResolutionError(
                "NestedClass", None, f"{unreachable} types are not reachable from a namespace"
            )
        logger.info(
            f"Built {module.name}: {len(namespaces)} namespaces, "
            f"{len(self.metadata.types)} types"
        )
        return module

    def build_type(self, type_def: TypeDefinition) -> TypeNode:
        if type_def.index in self._built:
            raise MetadataResolutionError(
                "NestedClass", type_def.index, f"type {type_def.name!r} is nested more than once"
            )
        self._built.add(type_def.index)

        children: List[Member] = [
            LeafMember(leaf.name, leaf_size(leaf))
            for leaf in (*type_def.fields, *type_def.methods, *type_def.properties)
        ]
        for nested_index in type_def.nested_indices:
            children.append(self.build_type(self.metadata.get_type(nested_index)))

        return TypeNode(
            name=type_def.name,
            children=children,
            namespace=type_def.namespace,
            index=type_def.index,
        )


def build_module_tree(metadata: ModuleMetadata) -> ModuleNode:
    """Build the size-accounting tree for one module."""
    return TreeBuilder(metadata).build()
