"""Load a content tree and its registries from a YAML or JSON document.

Document shape (JSON is accepted too, being a YAML subset):

    content_types:
      - {id: 10, alias: page, name: Page}
      - {id: 11, alias: home, name: Home, parent_id: 10}
    templates:
      - {id: 20, alias: master, name: Master}
      - {id: 21, alias: homePage, name: Home Page, parent_id: 20}
    content:                   # a single node or a list of nodes
      id: 1
      name: Home
      url: /
      level: 0                 # "depth" is accepted as well
      document_type_id: 11
      template_id: 21
      properties:              # mapping, or list of {alias, value}
        title: ""
        subtitle: Welcome
      children:
        - {id: 2, name: About, url: /about}

A node without a level gets its parent's level + 1 (0 for roots); one
without a url gets "/", the ContentNode default. parent_id chains in
content_types and templates must not loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from simplecontent.sources.memory import DEFAULT_URL, ContentNode, SourceProperty
from simplecontent.sources.summaries import (
    ContentTypeRecord,
    ContentTypeRegistry,
    TemplateRecord,
    TemplateRegistry,
)


class ContentSourceError(ValueError):
    """A content document is malformed. The message names the offending path."""


@dataclass
class ContentDocument:
    """Parsed document: root nodes plus the lookups they reference."""

    roots: list[ContentNode]
    # True when ``content`` was a list; serializers then emit an array
    is_collection: bool = False
    content_types: ContentTypeRegistry = field(default_factory=ContentTypeRegistry)
    templates: TemplateRegistry = field(default_factory=TemplateRegistry)


def _require_int(raw: dict, key: str, where: str) -> int:
    if key not in raw:
        raise ContentSourceError(f"{where}: missing required field {key!r}")
    return _as_int(raw[key], f"{where}.{key}")


def _as_int(value: Any, where: str) -> int:
    if isinstance(value, bool):
        raise ContentSourceError(f"{where}: expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise ContentSourceError(f"{where}: expected an integer, got {value!r}") from err


def _optional_int(raw: dict, key: str, where: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    return _as_int(value, f"{where}.{key}")


def _parse_properties(raw: Any, where: str) -> list[SourceProperty]:
    if raw is None:
        return []
    if isinstance(raw, dict):
        return [SourceProperty(alias=str(k), value=v) for k, v in raw.items()]
    if isinstance(raw, list):
        props: list[SourceProperty] = []
        for i, entry in enumerate(raw):
            if not isinstance(entry, dict) or "alias" not in entry:
                raise ContentSourceError(
                    f"{where}[{i}]: expected a mapping with an 'alias' key, got {entry!r}"
                )
            props.append(SourceProperty(alias=str(entry["alias"]), value=entry.get("value")))
        return props
    raise ContentSourceError(f"{where}: expected a mapping or a list, got {type(raw).__name__}")


def _parse_node(raw: Any, where: str, parent_level: int | None) -> ContentNode:
    if not isinstance(raw, dict):
        raise ContentSourceError(f"{where}: expected a mapping, got {type(raw).__name__}")

    if "name" not in raw:
        raise ContentSourceError(f"{where}: missing required field 'name'")

    level_raw = raw.get("level", raw.get("depth"))
    if level_raw is None:
        level = 0 if parent_level is None else parent_level + 1
    else:
        level = _as_int(level_raw, f"{where}.level")

    children_raw = raw.get("children")
    if children_raw is None:
        children_raw = []
    if not isinstance(children_raw, list):
        raise ContentSourceError(f"{where}.children: expected a list")

    return ContentNode(
        id=_require_int(raw, "id", where),
        name=str(raw["name"]),
        url=str(raw.get("url", DEFAULT_URL)),
        level=level,
        document_type_id=_optional_int(raw, "document_type_id", where),
        template_id=_optional_int(raw, "template_id", where),
        properties=_parse_properties(raw.get("properties"), f"{where}.properties"),
        children=[
            _parse_node(child, f"{where}.children[{i}]", level)
            for i, child in enumerate(children_raw)
        ],
    )


def _parse_records(raw: Any, key: str, record_cls: type) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ContentSourceError(f"{key}: expected a list")
    records = []
    for i, entry in enumerate(raw):
        where = f"{key}[{i}]"
        if not isinstance(entry, dict):
            raise ContentSourceError(f"{where}: expected a mapping")
        records.append(
            record_cls(
                id=_require_int(entry, "id", where),
                alias=str(entry.get("alias", "")),
                name=str(entry.get("name", "")),
                parent_id=_optional_int(entry, "parent_id", where),
            )
        )
    return records


def _check_parent_chains(records: list, key: str) -> None:
    """Reject parent_id chains that loop back on themselves."""
    by_id = {record.id: record for record in records}
    for i, record in enumerate(records):
        seen = {record.id}
        parent_id = record.parent_id
        while parent_id is not None and parent_id in by_id:
            if parent_id in seen:
                raise ContentSourceError(
                    f"{key}[{i}].parent_id: chain loops back to id {parent_id}"
                )
            seen.add(parent_id)
            parent_id = by_id[parent_id].parent_id


def parse_document(data: Any) -> ContentDocument:
    """Build a ContentDocument from already-decoded YAML/JSON data."""
    if not isinstance(data, dict):
        raise ContentSourceError("document: expected a mapping at the top level")
    if data.get("content") is None:
        raise ContentSourceError("document: missing required key 'content'")

    content = data["content"]
    if isinstance(content, list):
        roots = [_parse_node(n, f"content[{i}]", None) for i, n in enumerate(content)]
        is_collection = True
    else:
        roots = [_parse_node(content, "content", None)]
        is_collection = False

    content_types = _parse_records(data.get("content_types"), "content_types", ContentTypeRecord)
    _check_parent_chains(content_types, "content_types")
    templates = _parse_records(data.get("templates"), "templates", TemplateRecord)
    _check_parent_chains(templates, "templates")

    return ContentDocument(
        roots=roots,
        is_collection=is_collection,
        content_types=ContentTypeRegistry(content_types),
        templates=TemplateRegistry(templates),
    )


def load_document(path: Path) -> ContentDocument:
    """Read and parse a YAML or JSON content document from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise ContentSourceError(f"{path}: not UTF-8 text ({err.reason})") from err
    except OSError as err:
        raise ContentSourceError(f"{path}: cannot read file ({err.strerror or err})") from err
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise ContentSourceError(f"{path}: not valid YAML/JSON ({err})") from err
    return parse_document(data)
