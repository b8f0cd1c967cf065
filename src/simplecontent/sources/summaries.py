"""In-memory content-type and template registries.

Both implement the summarizer protocols the tree projector consumes:
``summarize(id, recurse)`` returns None for an unknown id, otherwise a
summary whose ``parent`` chain (parent content type / master template)
is expanded only when ``recurse`` is true.

Precondition: parent chains are acyclic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from simplecontent.core.models import ContentTypeSummary, TemplateSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentTypeRecord:
    """A document type as stored by the content system."""

    id: int
    alias: str
    name: str
    parent_id: int | None = None


@dataclass(frozen=True)
class TemplateRecord:
    """A template as stored by the content system; parent_id is its master."""

    id: int
    alias: str
    name: str
    parent_id: int | None = None


class ContentTypeRegistry:
    """Registry of content types keyed by id."""

    def __init__(self, records: Iterable[ContentTypeRecord] = ()) -> None:
        self._records: dict[int, ContentTypeRecord] = {}
        for record in records:
            self.register(record)

    def register(self, record: ContentTypeRecord) -> None:
        """Register a content type. Later registrations replace earlier ones."""
        self._records[record.id] = record

    def get(self, content_type_id: int) -> ContentTypeRecord | None:
        return self._records.get(content_type_id)

    def __len__(self) -> int:
        return len(self._records)

    def summarize(
        self, content_type_id: int | None, recurse: bool = True
    ) -> ContentTypeSummary | None:
        if content_type_id is None:
            return None
        record = self._records.get(content_type_id)
        if record is None:
            logger.debug("Unknown content type id %s", content_type_id)
            return None
        parent = None
        if recurse and record.parent_id is not None:
            parent = self.summarize(record.parent_id, recurse=True)
        return ContentTypeSummary(
            id=record.id,
            alias=record.alias,
            name=record.name,
            parent=parent,
        )


class TemplateRegistry:
    """Registry of templates keyed by id."""

    def __init__(self, records: Iterable[TemplateRecord] = ()) -> None:
        self._records: dict[int, TemplateRecord] = {}
        for record in records:
            self.register(record)

    def register(self, record: TemplateRecord) -> None:
        """Register a template. Later registrations replace earlier ones."""
        self._records[record.id] = record

    def get(self, template_id: int) -> TemplateRecord | None:
        return self._records.get(template_id)

    def __len__(self) -> int:
        return len(self._records)

    def summarize(
        self, template_id: int | None, recurse: bool = True
    ) -> TemplateSummary | None:
        if template_id is None:
            return None
        record = self._records.get(template_id)
        if record is None:
            logger.debug("Unknown template id %s", template_id)
            return None
        parent = None
        if recurse and record.parent_id is not None:
            parent = self.summarize(record.parent_id, recurse=True)
        return TemplateSummary(
            id=record.id,
            alias=record.alias,
            name=record.name,
            parent=parent,
        )
