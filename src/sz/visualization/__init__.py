"""Visualization layer: tree serialization and the HTML treemap report."""

from .report import generate_report, load_template, render_html
from .treemap import build_treemap_data, serialize_tree

__all__ = [
    "build_treemap_data",
    "serialize_tree",
    "generate_report",
    "load_template",
    "render_html",
]
