"""Plain-data and YAML renderings of the zk AST.

Every node becomes a dict whose first key is ``type`` (the node's tag),
followed by its fields in declaration order.  Locations are left out so the
output depends only on program structure.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any

import yaml

from zklib.parser.ast_nodes import Parameter, ProgramNode


def node_to_dict(node: Any) -> dict[str, Any]:
    """Convert one AST node (statement or expression) into nested dicts."""
    if isinstance(node, Parameter):
        return {"name": node.name, "type": node.type}

    out: dict[str, Any] = {"type": node.node_type}
    for f in fields(node):
        if f.name == "location":
            continue
        out[f.name] = _convert(getattr(node, f.name))
    return out


def _convert(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_convert(v) for v in value]
    if hasattr(value, "node_type") or isinstance(value, Parameter):
        return node_to_dict(value)
    return value


def program_to_dict(program: ProgramNode) -> dict[str, Any]:
    return {
        "file": program.filename,
        "statements": [node_to_dict(stmt) for stmt in program.statements],
    }


def dump_yaml(program: ProgramNode) -> str:
    """Render *program* as a YAML document."""
    return yaml.safe_dump(program_to_dict(program), sort_keys=False, default_flow_style=False)
