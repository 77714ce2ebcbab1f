"""Convert the size-accounting tree into d3-style hierarchical JSON.

Structure::

    {
        "name": "<assembly: Demo>",
        "children": [
            {
                "name": "Demo",
                "children": [
                    {
                        "name": "Point",
                        "children": [
                            {"name": "X", "value": 2},
                            {"name": "Y", "value": 2}
                        ]
                    }
                ]
            }
        ]
    }

Leaves carry ``value``; containers carry ``children`` (possibly empty).
Container totals are left to the consumer, which sums leaf values
bottom-up.
"""

import json
from typing import Any, Dict, Optional

from ..sizing.models import ModuleNode, Node, NodeKind


def build_treemap_data(node: Node) -> Dict[str, Any]:
    """Transcribe ``node`` and everything below it into plain dicts."""
    if node.kind is NodeKind.LEAF:
        return {"name": node.name, "value": node.size}
    if node.kind is NodeKind.CONTAINER:
        return {
            "name": node.name,
            "children": [build_treemap_data(child) for child in node.children],
        }
    raise ValueError(f"Unknown node kind: {node.kind!r}")


def serialize_tree(module: ModuleNode, indent: Optional[int] = None) -> str:
    return json.dumps(build_treemap_data(module), indent=indent, ensure_ascii=False)
