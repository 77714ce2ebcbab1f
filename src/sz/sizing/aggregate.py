"""Flat per-type totals for the text report."""

from dataclasses import dataclass, field
from typing import List

from .builder import namespace_key
from .models import ModuleNode, iter_types


@dataclass(frozen=True)
class TypeSize:
    qualified_name: str
    total: int


@dataclass(frozen=True)
class FlatReport:
    entries: List[TypeSize] = field(default_factory=list)
    grand_total: int = 0


def aggregate(module: ModuleNode) -> FlatReport:
    """Sum direct leaf sizes per type, in declaration order.

    Nested types get their own entry and are not folded into the enclosing
    type's total. Each entry is qualified with the type's own declared
    namespace, so nested types (whose declared namespace is empty) appear
    as ``<global>.Name``.
    """
    types = sorted(iter_types(module), key=lambda t: t.index)

    entries = [
        TypeSize(
            qualified_name=f"{namespace_key(t.namespace)}.{t.name}",
            total=sum(m.size for m in t.members),
        )
        for t in types
    ]
    return FlatReport(entries=entries, grand_total=sum(e.total for e in entries))
