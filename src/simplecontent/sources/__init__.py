"""Content sources -- in-memory nodes, lookups and document loading."""

from simplecontent.sources.loader import (
    ContentDocument,
    ContentSourceError,
    load_document,
    parse_document,
)
from simplecontent.sources.memory import ContentNode, SourceProperty, find_by_id
from simplecontent.sources.summaries import (
    ContentTypeRecord,
    ContentTypeRegistry,
    TemplateRecord,
    TemplateRegistry,
)

__all__ = [
    "ContentDocument",
    "ContentNode",
    "ContentSourceError",
    "ContentTypeRecord",
    "ContentTypeRegistry",
    "SourceProperty",
    "TemplateRecord",
    "TemplateRegistry",
    "find_by_id",
    "load_document",
    "parse_document",
]
