"""Size accounting: leaf metric, tree building and flat aggregation."""

from .aggregate import FlatReport, TypeSize, aggregate
from .builder import GLOBAL_NAMESPACE, TreeBuilder, build_module_tree, namespace_key
from .metric import field_size, leaf_size, method_size, property_size
from .models import (
    LeafMember,
    ModuleNode,
    NamespaceNode,
    NodeKind,
    TypeNode,
    iter_types,
    total_size,
)

__all__ = [
    "field_size",
    "method_size",
    "property_size",
    "leaf_size",
    "NodeKind",
    "LeafMember",
    "TypeNode",
    "NamespaceNode",
    "ModuleNode",
    "iter_types",
    "total_size",
    "GLOBAL_NAMESPACE",
    "namespace_key",
    "TreeBuilder",
    "build_module_tree",
    "TypeSize",
    "FlatReport",
    "aggregate",
]
