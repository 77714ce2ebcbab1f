"""JSON formatter for sz: the hierarchical tree on stdout."""

from typing import Optional

from ..sizing.models import ModuleNode
from ..visualization.treemap import serialize_tree
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the module tree as nested name/value/children JSON."""

    def __init__(self, indent: Optional[int] = None):
        self.indent = indent

    def format(self, module: ModuleNode) -> str:
        return serialize_tree(module, indent=self.indent)
