"""
sz - declaration size accounting for managed (.NET) modules

Walks the namespaces, types, fields, methods and properties a compiled
module declares and attributes a size to each one, either as a flat
per-type report or as a nested tree for treemap visualization.
"""

__version__ = "0.1.0"

from .metadata import ModuleMetadata, read_module
from .sizing import FlatReport, ModuleNode, aggregate, build_module_tree
from .visualization import generate_report, serialize_tree

__all__ = [
    "read_module",
    "build_module_tree",
    "aggregate",
    "serialize_tree",
    "generate_report",
    "ModuleMetadata",
    "ModuleNode",
    "FlatReport",
]
