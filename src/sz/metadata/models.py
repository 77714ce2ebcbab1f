"""In-memory snapshot of the declarations read from a managed module.

The reader copies everything the size accounting needs out of the binary
file into these frozen records, so the file handle can be released before
any tree building or rendering starts.
"""

from dataclasses import dataclass
from typing import Iterator, Literal, Optional, Tuple

from ..exceptions import MetadataResolutionError

IdentityKind = Literal["assembly", "module"]


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    signature_length: int


@dataclass(frozen=True)
class PropertyDefinition:
    name: str
    signature_length: int


@dataclass(frozen=True)
class MethodDefinition:
    """A declared method.

    ``body_length`` is the byte length of the executable body, or ``None``
    for abstract, extern and runtime-implemented methods.
    """

    name: str
    signature_length: int
    parameter_names: Tuple[str, ...] = ()
    body_length: Optional[int] = None

    @property
    def has_body(self) -> bool:
        return self.body_length is not None


@dataclass(frozen=True)
class TypeDefinition:
    """A declared type with its direct members.

    ``index`` is the 1-based TypeDef row, which is also the declaration
    enumeration order. ``nested_indices`` lists the rows of directly nested
    types in NestedClass table order.
    """

    index: int
    name: str
    namespace: str
    enclosing_index: Optional[int] = None
    fields: Tuple[FieldDefinition, ...] = ()
    methods: Tuple[MethodDefinition, ...] = ()
    properties: Tuple[PropertyDefinition, ...] = ()
    nested_indices: Tuple[int, ...] = ()

    @property
    def is_nested(self) -> bool:
        return self.enclosing_index is not None


@dataclass(frozen=True)
class ModuleMetadata:
    """Declared identity and types of one module."""

    name: str
    types: Tuple[TypeDefinition, ...] = ()
    kind: IdentityKind = "assembly"

    @property
    def label(self) -> str:
        """Bracketed display name, e.g. ``<assembly: Demo>``."""
        return f"<{self.kind}: {self.name}>"

    def get_type(self, index: int) -> TypeDefinition:
        # Rows are normally stored in table order, so try the direct slot first.
        if 0 < index <= len(self.types) and self.types[index - 1].index == index:
            return self.types[index - 1]
        for type_def in self.types:
            if type_def.index == index:
                return type_def
        raise MetadataResolutionError("TypeDef", index, "no such type")

    def top_level_types(self) -> Iterator[TypeDefinition]:
        return (t for t in self.types if not t.is_nested)
