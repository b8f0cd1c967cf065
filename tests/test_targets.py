"""Tests for projection targets: object/JSON/YAML shapes and the registry."""

from __future__ import annotations

import datetime
import json
from collections import OrderedDict
from decimal import Decimal

import pytest
import yaml

from simplecontent.core.models import ContentTypeSummary, ProjectedNode, TemplateSummary
from simplecontent.projectors import ProjectionOptions, ProjectionTarget, TreeProjector
from simplecontent.projectors import registry
from simplecontent.projectors.targets import JSONTarget, YAMLTarget, to_json, to_object, to_yaml
from simplecontent.sources.memory import ContentNode, SourceProperty


def _scenario_root() -> ContentNode:
    return ContentNode(
        id=1,
        name="Home",
        url="/",
        level=0,
        properties=[SourceProperty("title", ""), SourceProperty("subtitle", "Welcome")],
        children=[ContentNode(id=2, name="About", url="/about", level=1)],
    )


# -------------------------------------------------------------------------
# Object shape
# -------------------------------------------------------------------------


class TestToObject:
    def test_key_order_and_casing(self, home):
        d = to_object(TreeProjector().project(home))
        assert list(d) == ["Id", "Name", "Url", "Level", "Children", "ChildrenIds", "Properties"]

    def test_absent_optionals_omitted(self):
        node = ProjectedNode(id=5, name="Leaf", url="/leaf", level=1)
        d = to_object(node)
        assert "Children" not in d
        assert "ContentType" not in d
        assert "Template" not in d
        assert d["ChildrenIds"] == []
        assert d["Properties"] == {}

    def test_empty_children_kept(self):
        node = ProjectedNode(id=5, name="Leaf", url="/leaf", level=1, children=())
        assert to_object(node)["Children"] == []

    def test_summaries_with_parents(self, home, content_types, templates):
        node = TreeProjector(content_types=content_types, templates=templates).project(home)
        d = to_object(node)
        assert d["ContentType"] == {
            "Id": 11,
            "Alias": "home",
            "Name": "Home",
            "ParentContentType": {"Id": 10, "Alias": "page", "Name": "Page"},
        }
        assert d["Template"] == {
            "Id": 21,
            "Alias": "homePage",
            "Name": "Home Page",
            "ParentTemplate": {"Id": 20, "Alias": "master", "Name": "Master"},
        }

    def test_summary_without_parent(self):
        node = ProjectedNode(
            id=1,
            name="n",
            url="/",
            level=0,
            content_type=ContentTypeSummary(id=3, alias="a", name="A"),
            template=TemplateSummary(id=4, alias="t", name="T"),
        )
        d = to_object(node)
        assert "ParentContentType" not in d["ContentType"]
        assert "ParentTemplate" not in d["Template"]

    def test_sequence_becomes_list(self, home):
        nodes = TreeProjector().project_all(home.children)
        out = to_object(nodes)
        assert isinstance(out, list)
        assert [d["Id"] for d in out] == [2, 3]

    def test_none_handling(self):
        assert to_object(None) is None
        node = ProjectedNode(id=1, name="n", url="/", level=0)
        assert to_object([None, node])[0] is None

    def test_properties_are_copied(self):
        node = ProjectedNode(id=1, name="n", url="/", level=0, properties={"a": 1})
        d = to_object(node)
        d["Properties"]["b"] = 2
        assert node.properties == {"a": 1}


# -------------------------------------------------------------------------
# JSON
# -------------------------------------------------------------------------


class TestToJson:
    def test_end_to_end_scenario(self):
        projected = TreeProjector().project(_scenario_root(), ProjectionOptions())
        data = json.loads(to_json(projected))
        assert data["Id"] == 1
        assert data["Name"] == "Home"
        assert data["Url"] == "/"
        assert data["Level"] == 0
        assert data["Properties"] == {"subtitle": "Welcome"}
        assert data["ChildrenIds"] == [2]
        assert data["Children"] == [
            {
                "Id": 2,
                "Name": "About",
                "Url": "/about",
                "Level": 1,
                "Children": [],
                "ChildrenIds": [],
                "Properties": {},
            }
        ]

    def test_leaf_without_recursion_has_no_children_key(self):
        leaf = ContentNode(id=9, name="Leaf", url="/leaf", level=1)
        projected = TreeProjector().project(leaf, ProjectionOptions(recurse_children=False))
        data = json.loads(to_json(projected))
        assert "Children" not in data
        assert data["ChildrenIds"] == []

    def test_native_types_preserved(self):
        leaf = ContentNode(
            id=9,
            name="Leaf",
            properties=[
                SourceProperty("count", 0),
                SourceProperty("ratio", 0.5),
                SourceProperty("published", True),
                SourceProperty("tags", ["a", "b"]),
                SourceProperty("meta", {"k": [1, 2]}),
            ],
        )
        data = json.loads(to_json(TreeProjector().project(leaf)))
        assert data["Properties"] == {
            "count": 0,
            "ratio": 0.5,
            "published": True,
            "tags": ["a", "b"],
            "meta": {"k": [1, 2]},
        }

    def test_non_json_values_fall_back_to_str(self):
        leaf = ContentNode(
            id=9,
            name="Leaf",
            properties=[
                SourceProperty("when", datetime.date(2024, 1, 2)),
                SourceProperty("price", Decimal("1.50")),
            ],
        )
        data = json.loads(to_json(TreeProjector().project(leaf)))
        assert data["Properties"] == {"when": "2024-01-02", "price": "1.50"}

    def test_collection_is_array(self, home):
        projector = TreeProjector()
        nodes = projector.project_all(home.children)
        data = json.loads(to_json(nodes))
        assert isinstance(data, list)
        assert len(data) == 2
        assert data[0] == json.loads(to_json(nodes[0]))

    def test_unicode_not_escaped(self):
        node = ProjectedNode(id=1, name="Café", url="/", level=0)
        assert "Café" in to_json(node)

    def test_compact_indent(self):
        node = ProjectedNode(id=1, name="n", url="/", level=0)
        assert "\n" not in to_json(node, indent=None)


# -------------------------------------------------------------------------
# YAML
# -------------------------------------------------------------------------


class TestToYaml:
    def test_same_shape_as_json(self, home, content_types, templates):
        node = TreeProjector(content_types=content_types, templates=templates).project(home)
        assert yaml.safe_load(to_yaml(node)) == json.loads(to_json(node))

    def test_tuples_and_dict_subclasses_match_json(self):
        leaf = ContentNode(
            id=9,
            name="Leaf",
            properties=[
                SourceProperty("size", (640, 480)),
                SourceProperty("seo", OrderedDict(index=True, follow=False)),
            ],
        )
        node = TreeProjector().project(leaf)
        data = yaml.safe_load(to_yaml(node))
        assert data == json.loads(to_json(node))
        assert data["Properties"] == {
            "size": [640, 480],
            "seo": {"index": True, "follow": False},
        }

    def test_unrepresentable_values_stringified(self):
        leaf = ContentNode(id=9, name="Leaf", properties=[SourceProperty("price", Decimal("2.5"))])
        data = yaml.safe_load(to_yaml(TreeProjector().project(leaf)))
        assert data["Properties"] == {"price": "2.5"}


# -------------------------------------------------------------------------
# Target classes + registry
# -------------------------------------------------------------------------


class TestTargets:
    def test_targets_implement_protocol(self):
        assert isinstance(JSONTarget(), ProjectionTarget)
        assert isinstance(YAMLTarget(), ProjectionTarget)

    def test_json_target_indent(self):
        node = ProjectedNode(id=1, name="n", url="/", level=0)
        assert JSONTarget(indent=None).serialize(node) == to_json(node, indent=None)

    def test_yaml_target(self):
        node = ProjectedNode(id=1, name="n", url="/", level=0)
        assert YAMLTarget().serialize(node) == to_yaml(node)


class TestRegistry:
    def test_builtin_targets(self):
        assert registry.available_targets() == ["json", "yaml"]

    def test_get_target_with_kwargs(self):
        target = registry.get_target("json", indent=4)
        assert isinstance(target, JSONTarget)
        assert target.indent == 4

    def test_unknown_target(self):
        with pytest.raises(KeyError, match="Unknown projection target"):
            registry.get_target("xml")

    def test_register_custom_target(self):
        class CountTarget:
            def serialize(self, nodes):
                return str(len(nodes))

        registry.register_target("count", CountTarget)
        assert "count" in registry.available_targets()
        assert registry.get_target("count").serialize([1, 2]) == "2"

    def test_reset_restores_builtins(self):
        registry.register_target("count", object)
        registry.reset()
        assert registry.available_targets() == ["json", "yaml"]
