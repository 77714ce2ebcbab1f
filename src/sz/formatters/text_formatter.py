"""Flat text report: one line per type, then the grand total."""

from ..sizing.aggregate import aggregate
from ..sizing.models import ModuleNode
from .base import BaseFormatter

HEADER = "Type\tSize"


class TextFormatter(BaseFormatter):
    """Render per-type totals as tab-separated ``qualified_name<TAB>total`` lines.

    A ``Type<TAB>Size`` header comes first; a blank line and
    ``Total size: N`` close the report.
    """

    def format(self, module: ModuleNode) -> str:
        report = aggregate(module)
        lines = [HEADER]
        lines.extend(f"{entry.qualified_name}\t{entry.total}" for entry in report.entries)
        lines.append("")
        lines.append(f"Total size: {report.grand_total}")
        return "\n".join(lines)
