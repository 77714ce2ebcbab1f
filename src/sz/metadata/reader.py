"""Read declared types and members from a managed PE module with dnfile.

This is the only place the binary format is touched. The file is opened,
every fact the size accounting needs is copied into a ``ModuleMetadata``
snapshot, and the handle is closed before the snapshot is returned.
"""

from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import dnfile
import pefile

from ..exceptions import MetadataResolutionError, ModuleOpenError
from ..logging_config import get_logger
from .method_body import method_body_size
from .models import (
    FieldDefinition,
    MethodDefinition,
    ModuleMetadata,
    PropertyDefinition,
    TypeDefinition,
)

logger = get_logger(__name__)


def read_module(path: Union[str, Path]) -> ModuleMetadata:
    """Open the module at ``path`` and return its declaration snapshot.

    Raises:
        ModuleOpenError: If the path is missing, unreadable, not a PE image
            or carries no CLR metadata
        MetadataResolutionError: If a row references an unresolvable
            name, signature or body
    """
    path = Path(path)
    if not path.is_file():
        raise ModuleOpenError(path, "no such file")

    try:
        pe = dnfile.dnPE(str(path))
    except (OSError, pefile.PEFormatError) as e:
        raise ModuleOpenError(path, str(e)) from e

    try:
        if pe.net is None or getattr(pe.net, "mdtables", None) is None:
            raise ModuleOpenError(path, "no CLR metadata")
        metadata = MetadataReader(pe).read()
    finally:
        pe.close()

    logger.debug(f"Read {len(metadata.types)} types from {path}")
    return metadata


def _string(value: Any, table: str, row: int, column: str) -> str:
    text = getattr(value, "value", value)
    if not isinstance(text, str):
        raise MetadataResolutionError(table, row, f"{column} does not resolve to a string")
    return text


def _blob_length(value: Any, table: str, row: int, column: str) -> int:
    data = getattr(value, "value", value)
    if not isinstance(data, (bytes, bytearray)):
        raise MetadataResolutionError(table, row, f"{column} does not resolve to a blob")
    return len(data)


class MetadataReader:
    """Copies metadata tables of an open ``dnfile.dnPE`` into records."""

    def __init__(self, pe: Any):
        self.pe = pe
        self.tables = pe.net.mdtables

    def read(self) -> ModuleMetadata:
        name, kind = self._identity()

        enclosing_of: Dict[int, int] = {}
        nested_of: Dict[int, List[int]] = defaultdict(list)
        for row_number, row in enumerate(self._rows("NestedClass"), start=1):
            nested = self._index(row.NestedClass, "NestedClass", row_number)
            enclosing = self._index(row.EnclosingClass, "NestedClass", row_number)
            if nested in enclosing_of:
                raise MetadataResolutionError(
                    "NestedClass", row_number, f"type {nested} has more than one enclosing type"
                )
            enclosing_of[nested] = enclosing
            nested_of[enclosing].append(nested)

        properties_of: Dict[int, List[Any]] = defaultdict(list)
        for row_number, row in enumerate(self._rows("PropertyMap"), start=1):
            parent = self._index(row.Parent, "PropertyMap", row_number)
            properties_of[parent].extend(row.PropertyList or [])

        types = []
        for index, row in enumerate(self._rows("TypeDef"), start=1):
            types.append(
                TypeDefinition(
                    index=index,
                    name=_string(row.TypeName, "TypeDef", index, "TypeName"),
                    namespace=_string(row.TypeNamespace, "TypeDef", index, "TypeNamespace"),
                    enclosing_index=enclosing_of.get(index),
                    fields=tuple(self._field(ref) for ref in row.FieldList or []),
                    methods=tuple(self._method(ref) for ref in row.MethodList or []),
                    properties=tuple(self._property(ref) for ref in properties_of.get(index, [])),
                    nested_indices=tuple(nested_of.get(index, [])),
                )
            )

        logger.debug(
            f"{name}: {len(types)} TypeDef rows, {len(enclosing_of)} nested, "
            f"{len(properties_of)} types with properties"
        )
        return ModuleMetadata(name=name, types=tuple(types), kind=kind)

    def _rows(self, table_name: str) -> List[Any]:
        table = getattr(self.tables, table_name, None)
        if table is None:
            return []
        return list(table.rows)

    def _identity(self):
        assembly = self._rows("Assembly")
        if assembly:
            return _string(assembly[0].Name, "Assembly", 1, "Name"), "assembly"
        module = self._rows("Module")
        if module:
            return _string(module[0].Name, "Module", 1, "Name"), "module"
        raise MetadataResolutionError("Assembly", None, "module declares no identity")

    @staticmethod
    def _index(ref: Any, table: str, row: int) -> int:
        index = getattr(ref, "row_index", None)
        if not index:
            raise MetadataResolutionError(table, row, "null type reference")
        return index

    @staticmethod
    def _deref(ref: Any, table: str) -> Any:
        row = getattr(ref, "row", None)
        if row is None:
            raise MetadataResolutionError(
                table, getattr(ref, "row_index", None), "dangling row reference"
            )
        return row

    def _field(self, ref: Any) -> FieldDefinition:
        row = self._deref(ref, "Field")
        index = ref.row_index
        return FieldDefinition(
            name=_string(row.Name, "Field", index, "Name"),
            signature_length=_blob_length(row.Signature, "Field", index, "Signature"),
        )

    def _property(self, ref: Any) -> PropertyDefinition:
        row = self._deref(ref, "Property")
        index = ref.row_index
        return PropertyDefinition(
            name=_string(row.Name, "Property", index, "Name"),
            signature_length=_blob_length(row.Type, "Property", index, "Type"),
        )

    def _method(self, ref: Any) -> MethodDefinition:
        row = self._deref(ref, "MethodDef")
        index = ref.row_index

        parameter_names = []
        for param_ref in row.ParamList or []:
            param = self._deref(param_ref, "Param")
            parameter_names.append(_string(param.Name, "Param", param_ref.row_index, "Name"))

        body_length: Optional[int] = None
        if row.Rva:
            body_length = method_body_size(self._get_data, row.Rva)

        return MethodDefinition(
            name=_string(row.Name, "MethodDef", index, "Name"),
            signature_length=_blob_length(row.Signature, "MethodDef", index, "Signature"),
            parameter_names=tuple(parameter_names),
            body_length=body_length,
        )

    def _get_data(self, rva: int, length: int) -> bytes:
        try:
            return self.pe.get_data(rva, length)
        except pefile.PEFormatError as e:
            raise MetadataResolutionError("MethodBody", None, str(e)) from e
