"""Projection targets -- serialize projected nodes to output formats."""

from simplecontent.projectors.targets._serialize import to_json, to_object, to_yaml
from simplecontent.projectors.targets.json_target import JSONTarget
from simplecontent.projectors.targets.yaml_target import YAMLTarget

__all__ = [
    "JSONTarget",
    "YAMLTarget",
    "to_json",
    "to_object",
    "to_yaml",
]
