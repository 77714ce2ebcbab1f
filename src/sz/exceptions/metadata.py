"""Metadata exceptions: opening modules and resolving table rows."""

from pathlib import Path
from typing import Optional

from .base import SzError


class MetadataError(SzError):
    """Base class for errors raised while reading module metadata."""

    pass


class ModuleOpenError(MetadataError):
    """Raised when a path cannot be opened as a managed module."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot open module: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class MetadataResolutionError(MetadataError):
    """Raised when a metadata row cannot be resolved to a name or signature."""

    def __init__(self, table: str, row: Optional[int], reason: str):
        details = {"table": table, "reason": reason}
        if row is not None:
            details["row"] = str(row)

        location = table if row is None else f"{table}[{row}]"
        super().__init__(f"Unresolvable metadata in {location}", details=details)
        self.table = table
        self.row = row
        self.reason = reason
