"""Deep merge tests."""

import pytest

from zedsettings.merge import (
    ARRAY,
    BOOL,
    NULL,
    NUMBER,
    OBJECT,
    STRING,
    deep_merge,
    is_config_node,
    merge_all,
    node_kind,
)


class TestNodeKind:
    @pytest.mark.parametrize(
        "value,kind",
        [
            (None, NULL),
            (True, BOOL),
            (0, NUMBER),
            (1.5, NUMBER),
            ("x", STRING),
            ([1], ARRAY),
            ({"a": 1}, OBJECT),
        ],
    )
    def test_classifies_json_values(self, value, kind) -> None:
        assert node_kind(value) == kind

    def test_rejects_non_json(self) -> None:
        with pytest.raises(TypeError):
            node_kind({1, 2})
        with pytest.raises(TypeError):
            node_kind(lambda: None)

    def test_is_config_node(self) -> None:
        assert is_config_node({"a": [1, {"b": None}], "c": "s"})
        assert not is_config_node({"a": [1, object()]})
        assert not is_config_node({1: "int key"})


class TestDeepMerge:
    def test_deep_combination(self) -> None:
        result = deep_merge({"a": {"x": 1, "y": 2}}, {"a": {"y": 3, "z": 4}})
        assert result == {"a": {"x": 1, "y": 3, "z": 4}}

    def test_overlay_precedence(self) -> None:
        result = deep_merge({"a": "old", "b": 1}, {"a": "new", "b": False})
        assert result == {"a": "new", "b": False}

    def test_array_replaces_wholesale(self) -> None:
        result = deep_merge({"list": [1, 2, 3]}, {"list": [9]})
        assert result == {"list": [9]}

    def test_empty_array_replaces(self) -> None:
        assert deep_merge({"list": [1, 2]}, {"list": []}) == {"list": []}

    def test_object_replaces_non_object(self) -> None:
        assert deep_merge({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_object_replaces_array(self) -> None:
        assert deep_merge({"a": [1, 2]}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_scalar_replaces_object(self) -> None:
        assert deep_merge({"a": {"x": 1}}, {"a": "flat"}) == {"a": "flat"}

    def test_null_overwrites(self) -> None:
        assert deep_merge({"a": {"x": 1}}, {"a": None}) == {"a": None}

    def test_untouched_keys(self) -> None:
        assert deep_merge({"a": 1, "b": 2}, {"a": 9}) == {"a": 9, "b": 2}

    def test_empty_source_identity(self) -> None:
        target = {"a": {"b": [1, 2]}, "c": None}
        assert deep_merge(target, {}) == target

    def test_empty_target(self) -> None:
        source = {"a": {"b": [1, 2]}}
        assert deep_merge({}, source) == source

    def test_idempotent(self) -> None:
        target = {"a": {"x": 1}, "l": [1], "k": "v"}
        source = {"a": {"y": {"z": 2}}, "l": [3, 4]}
        once = deep_merge(target, source)
        assert deep_merge(once, source) == once

    def test_deeply_nested(self) -> None:
        target = {"a": {"b": {"c": {"d": 1, "e": 2}}}}
        source = {"a": {"b": {"c": {"e": 3}, "f": [1]}}}
        assert deep_merge(target, source) == {"a": {"b": {"c": {"d": 1, "e": 3}, "f": [1]}}}

    def test_inputs_unchanged(self) -> None:
        target = {"a": {"x": 1}}
        source = {"a": {"y": 2}, "l": [1]}
        deep_merge(target, source)
        assert target == {"a": {"x": 1}}
        assert source == {"a": {"y": 2}, "l": [1]}

    def test_result_does_not_alias_inputs(self) -> None:
        target = {"keep": {"x": 1}}
        source = {"l": [1, 2], "o": {"y": 2}}
        result = deep_merge(target, source)
        result["l"].append(3)
        result["o"]["y"] = 99
        result["keep"]["x"] = 99
        assert source == {"l": [1, 2], "o": {"y": 2}}
        assert target == {"keep": {"x": 1}}

    def test_rejects_non_dict_arguments(self) -> None:
        with pytest.raises(TypeError):
            deep_merge([], {})
        with pytest.raises(TypeError):
            deep_merge({}, "x")

    def test_rejects_non_json_values(self) -> None:
        with pytest.raises(TypeError):
            deep_merge({}, {"a": {1, 2}})

    def test_zed_settings_scenario(self) -> None:
        existing = {
            "tab_size": 4,
            "languages": {"TypeScript": {"tab_size": 2, "language_servers": ["eslint"]}},
        }
        template = {"languages": {"TypeScript": {"language_servers": ["biome", "..."]}}}
        assert deep_merge(existing, template) == {
            "tab_size": 4,
            "languages": {"TypeScript": {"tab_size": 2, "language_servers": ["biome", "..."]}},
        }


class TestMergeAll:
    def test_later_overlays_win(self) -> None:
        result = merge_all({"a": 1}, {"a": 2, "b": {"x": 1}}, {"b": {"y": 2}})
        assert result == {"a": 2, "b": {"x": 1, "y": 2}}

    def test_no_overlays_copies_base(self) -> None:
        base = {"a": {"b": 1}}
        result = merge_all(base)
        assert result == base
        assert result is not base

    def test_base_reusable(self) -> None:
        base = {"a": {"x": 1}}
        first = merge_all(base, {"a": {"y": 1}})
        second = merge_all(base, {"a": {"z": 1}})
        assert first == {"a": {"x": 1, "y": 1}}
        assert second == {"a": {"x": 1, "z": 1}}
