"""Shared fixtures: a small content tree, lookups and env isolation."""

from __future__ import annotations

import os

import pytest

from simplecontent.projectors import options as options_module
from simplecontent.projectors import registry
from simplecontent.sources.memory import ContentNode, SourceProperty
from simplecontent.sources.summaries import (
    ContentTypeRecord,
    ContentTypeRegistry,
    TemplateRecord,
    TemplateRegistry,
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """No SIMPLECONTENT_* env vars or home options file leak into tests."""
    for key in list(os.environ):
        if key.startswith("SIMPLECONTENT_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(options_module, "_DEFAULT_PATH", tmp_path / "no-options.yaml")
    registry.reset()
    yield
    registry.reset()


@pytest.fixture
def home() -> ContentNode:
    """Home (id=1) with About (id=2) and Blog (id=3) -> Post (id=4)."""
    return ContentNode(
        id=1,
        name="Home",
        url="/",
        level=0,
        document_type_id=11,
        template_id=21,
        properties=[
            SourceProperty("title", ""),
            SourceProperty("subtitle", "Welcome"),
            SourceProperty("visits", 0),
        ],
        children=[
            ContentNode(id=2, name="About", url="/about", level=1, document_type_id=10),
            ContentNode(
                id=3,
                name="Blog",
                url="/blog",
                level=1,
                document_type_id=10,
                template_id=20,
                children=[
                    ContentNode(
                        id=4,
                        name="Post",
                        url="/blog/post",
                        level=2,
                        properties=[SourceProperty("tags", ["a", "b"])],
                    ),
                ],
            ),
        ],
    )


@pytest.fixture
def content_types() -> ContentTypeRegistry:
    """page (10) <- home (11)."""
    return ContentTypeRegistry(
        [
            ContentTypeRecord(id=10, alias="page", name="Page"),
            ContentTypeRecord(id=11, alias="home", name="Home", parent_id=10),
        ]
    )


@pytest.fixture
def templates() -> TemplateRegistry:
    """master (20) <- homePage (21)."""
    return TemplateRegistry(
        [
            TemplateRecord(id=20, alias="master", name="Master"),
            TemplateRecord(id=21, alias="homePage", name="Home Page", parent_id=20),
        ]
    )
