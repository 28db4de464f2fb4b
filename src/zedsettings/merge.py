"""Deep merge of JSON-shaped settings trees.

Objects are merged key by key, lists and scalars from the overlay replace
whatever the base holds. Inputs are never modified: the result is a new tree
that shares no containers with either argument.

Cyclic inputs are not detected and end in ``RecursionError``. Values parsed
from JSON or YAML documents are always acyclic.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Union

logger = logging.getLogger(__name__)

ConfigNode = Union[None, bool, int, float, str, list["ConfigNode"], dict[str, "ConfigNode"]]

NULL = "null"
BOOL = "bool"
NUMBER = "number"
STRING = "string"
ARRAY = "array"
OBJECT = "object"


def node_kind(value: Any) -> str:
    """Classify a value as one of the ConfigNode variants.

    Raises TypeError for anything JSON cannot represent.
    """
    if value is None:
        return NULL
    # bool before int: True is an int too
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, list):
        return ARRAY
    if isinstance(value, dict):
        return OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_config_node(value: Any) -> bool:
    """Return True if value is a well-formed ConfigNode tree."""
    try:
        kind = node_kind(value)
    except TypeError:
        return False
    if kind == ARRAY:
        return all(is_config_node(v) for v in value)
    if kind == OBJECT:
        return all(isinstance(k, str) and is_config_node(v) for k, v in value.items())
    return True


def deep_merge(target: dict, source: dict) -> dict:
    """Recursively merge source into target, returning a new dict.

    Source wins on conflicts. Nested objects are merged field by field, an
    object in source replaces a non-object in target, and lists are replaced
    wholesale.
    """
    if not isinstance(target, dict) or not isinstance(source, dict):
        raise TypeError("deep_merge() arguments must both be dicts")

    result = copy.deepcopy(target)
    _merge_into(result, source)
    return result


def _merge_into(result: dict, source: dict) -> None:
    for key, value in source.items():
        if node_kind(value) == OBJECT:
            current = result.get(key)
            if not isinstance(current, dict):
                current = {}
                result[key] = current
            _merge_into(current, value)
        else:
            result[key] = copy.deepcopy(value)


def merge_all(base: dict, *overlays: dict) -> dict:
    """Merge overlays over base in order; later overlays win."""
    result = deep_merge(base, {})
    for overlay in overlays:
        result = deep_merge(result, overlay)
    logger.debug("Merged %d overlay(s) over %d base key(s)", len(overlays), len(base))
    return result
