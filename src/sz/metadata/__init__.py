"""Module metadata: declaration snapshot and the dnfile-backed reader."""

from .method_body import method_body_size
from .models import (
    FieldDefinition,
    MethodDefinition,
    ModuleMetadata,
    PropertyDefinition,
    TypeDefinition,
)
from .reader import MetadataReader, read_module

__all__ = [
    "FieldDefinition",
    "MethodDefinition",
    "PropertyDefinition",
    "TypeDefinition",
    "ModuleMetadata",
    "MetadataReader",
    "method_body_size",
    "read_module",
]
