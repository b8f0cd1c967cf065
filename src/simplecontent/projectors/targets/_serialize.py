"""Shared serialization helpers for projection targets.

Key convention: PascalCase, the casing used by the content API the
projected nodes mirror (Id, Name, Url, Level, Children, ChildrenIds,
ContentType, Template, Properties). Optional fields that are None are
omitted rather than emitted as null. JSONTarget and YAMLTarget are thin
wrappers over these.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import yaml

from simplecontent.core.models import ContentTypeSummary, ProjectedNode, TemplateSummary


def content_type_to_dict(summary: ContentTypeSummary) -> dict[str, Any]:
    d: dict[str, Any] = {
        "Id": summary.id,
        "Alias": summary.alias,
        "Name": summary.name,
    }
    if summary.parent is not None:
        d["ParentContentType"] = content_type_to_dict(summary.parent)
    return d


def template_to_dict(summary: TemplateSummary) -> dict[str, Any]:
    d: dict[str, Any] = {
        "Id": summary.id,
        "Alias": summary.alias,
        "Name": summary.name,
    }
    if summary.parent is not None:
        d["ParentTemplate"] = template_to_dict(summary.parent)
    return d


def node_to_dict(node: ProjectedNode) -> dict[str, Any]:
    """Convert a projected node (and its projected children) to a plain dict."""
    d: dict[str, Any] = {
        "Id": node.id,
        "Name": node.name,
        "Url": node.url,
        "Level": node.level,
    }
    if node.children is not None:
        d["Children"] = [node_to_dict(c) for c in node.children]
    d["ChildrenIds"] = list(node.child_ids)
    if node.content_type is not None:
        d["ContentType"] = content_type_to_dict(node.content_type)
    if node.template is not None:
        d["Template"] = template_to_dict(node.template)
    # Values are passed through untouched; the encoder decides their type
    d["Properties"] = dict(node.properties)
    return d


def to_object(
    nodes: ProjectedNode | Sequence[ProjectedNode | None] | None,
) -> dict[str, Any] | list[dict[str, Any] | None] | None:
    """Structured-object form of one node or a sequence of nodes.

    A single node becomes a dict, a sequence becomes a list (None entries
    stay None so positions line up with the input).
    """
    if nodes is None:
        return None
    if isinstance(nodes, ProjectedNode):
        return node_to_dict(nodes)
    return [node_to_dict(n) if n is not None else None for n in nodes]


def to_json(
    nodes: ProjectedNode | Sequence[ProjectedNode | None] | None,
    indent: int | None = 2,
) -> str:
    """Serialize one node (JSON object) or a sequence (JSON array) to text.

    Values without a native JSON type (dates, decimals, ...) fall back to str().
    """
    return json.dumps(to_object(nodes), indent=indent, ensure_ascii=False, default=str)


def _represent_fallback(dumper: yaml.SafeDumper, data: Any) -> yaml.Node:
    return dumper.represent_str(str(data))


class _ProjectionDumper(yaml.SafeDumper):
    """SafeDumper matching the JSON encoder.

    Tuples and dict/list subclasses are written as plain sequences and
    mappings, and anything else without a representer is stringified.
    """


_ProjectionDumper.add_multi_representer(dict, yaml.SafeDumper.represent_dict)
_ProjectionDumper.add_multi_representer(list, yaml.SafeDumper.represent_list)
_ProjectionDumper.add_multi_representer(tuple, yaml.SafeDumper.represent_list)
_ProjectionDumper.add_multi_representer(object, _represent_fallback)


def to_yaml(nodes: ProjectedNode | Sequence[ProjectedNode | None] | None) -> str:
    """Serialize one node or a sequence of nodes to YAML text."""
    return yaml.dump(
        to_object(nodes),
        Dumper=_ProjectionDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
