"""mdast JSON adapter for colonmark nodes.

Converts colonmark nodes to/from mdast-shaped dicts, so trees produced by
an external Markdown parser (remark, markdown-it plugins, ...) can be fed
to the transforms and handed back afterwards.

- Node types use mdast names (``paragraph``, ``textDirective``, ...)
- Positions use the unist shape (``start``/``end`` with ``line``/``column``/``offset``)
- ``None`` fields are omitted, like optional mdast properties

All output is deterministic (sorted keys).

Example:
    from colonmark.serialization import from_json, to_json

    tree = from_json(remark_output)
    remove_unused_directives(tree, file)
    print(to_json(tree))

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from colonmark.errors import SerializationError
from colonmark.location import Point, Position
from colonmark.nodes import (
    DIRECTIVE_TYPES,
    NODE_TYPES,
    Directive,
    DirectiveKind,
    Node,
    Parent,
    Root,
)

# Fields that are encoded under another key (or not at all)
_SPECIAL_FIELDS = {"position", "children", "kind"}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to an mdast dict.

    Args:
        node: Any colonmark node.

    Returns:
        Dict with ``type`` and every non-None node field.

    """
    result: dict[str, Any] = {"type": node.type}

    for f in fields(node):
        if f.name in _SPECIAL_FIELDS:
            continue
        value = getattr(node, f.name)
        if value is not None:
            result[f.name] = value

    if isinstance(node, Parent):
        result["children"] = [to_dict(child) for child in node.children]
    if node.position is not None:
        result["position"] = _position_to_dict(node.position)
    return result


def _point_to_dict(point: Point) -> dict[str, int]:
    result = {"line": point.line, "column": point.column}
    if point.offset is not None:
        result["offset"] = point.offset
    return result


def _position_to_dict(position: Position) -> dict[str, Any]:
    result = {"start": _point_to_dict(position.start)}
    if position.end is not None:
        result["end"] = _point_to_dict(position.end)
    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a colonmark node from an mdast dict.

    Unknown keys are ignored; unknown node types are not.

    Raises:
        SerializationError: If ``type`` is missing or unknown, or the
            position is malformed.

    """
    if not isinstance(data, dict):
        msg = f"Expected an mdast node object, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in mdast node"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    if type_name in DIRECTIVE_TYPES:
        node_cls: type[Node] = Directive
        kwargs["kind"] = DirectiveKind(type_name)
    else:
        node_cls = NODE_TYPES.get(type_name)  # type: ignore[assignment]
        if node_cls is None:
            msg = f"Unknown node type: {type_name!r}"
            raise SerializationError(msg)

    for f in fields(node_cls):
        if f.name in _SPECIAL_FIELDS or f.name not in data:
            continue
        kwargs[f.name] = data[f.name]

    if issubclass(node_cls, Parent):
        kwargs["children"] = [from_dict(child) for child in data.get("children", [])]
    if data.get("position") is not None:
        kwargs["position"] = _position_from_dict(data["position"])

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid {type_name!r} node: {e}"
        raise SerializationError(msg) from e


def _point_from_dict(data: dict[str, Any]) -> Point:
    return Point(line=data["line"], column=data["column"], offset=data.get("offset"))


def _position_from_dict(data: dict[str, Any]) -> Position:
    try:
        start = _point_from_dict(data["start"])
        end = _point_from_dict(data["end"]) if data.get("end") is not None else None
    except (KeyError, TypeError) as e:
        msg = f"Malformed position: {data!r}"
        raise SerializationError(msg) from e
    return Position(start=start, end=end)


def to_json(tree: Node, *, indent: int | None = None) -> str:
    """Serialize a tree to an mdast JSON string (sorted keys)."""
    return json.dumps(to_dict(tree), sort_keys=True, indent=indent)


def from_json(data: str) -> Root:
    """Deserialize an mdast JSON document.

    Raises:
        SerializationError: If the JSON does not describe a ``root`` node.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Root):
        msg = f"Expected root, got {node.type}"
        raise SerializationError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
