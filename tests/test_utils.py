"""JSON helper tests."""

import json
from pathlib import Path

import pytest

from zedsettings.errors import SettingsParseError
from zedsettings.utils import load_json, save_json


class TestLoadJson:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_json(tmp_path / "nope.json") == {}

    def test_loads_object(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text('{"a": {"b": [1, 2]}}', encoding="utf-8")
        assert load_json(path) == {"a": {"b": [1, 2]}}

    def test_malformed(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SettingsParseError, match="Could not parse"):
            load_json(path)

    def test_non_object_top_level(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(SettingsParseError, match="expected a JSON object"):
            load_json(path)


class TestSaveJson:
    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "s.json"
        save_json(path, {"x": 1})
        assert json.loads(path.read_text(encoding="utf-8")) == {"x": 1}

    def test_two_space_indent(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        save_json(path, {"a": {"b": 1}})
        assert path.read_text(encoding="utf-8") == '{\n  "a": {\n    "b": 1\n  }\n}\n'
