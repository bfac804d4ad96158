"""Tests for loading option trees from files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sm_common.errors import OptionSourceError
from sm_core.models import OptionDescriptor, OptionGroup
from sm_core.registry import flatten
from sm_ui.services.options_file import load_options, parse_options


pytestmark = pytest.mark.unit_ui


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_yaml_with_groups(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "options.yaml",
        """
options:
  - Apple
  - group: Citrus
    options:
      - Lemon
      - content: Lime
        disabled: true
        sku: L-1
  - label: Banana
""",
    )

    tree = load_options(path)

    assert tree[0] == OptionDescriptor(content="Apple")
    assert isinstance(tree[1], OptionGroup)
    assert tree[1].label == "Citrus"
    records = flatten(tree)
    assert [r.content for r in records] == ["Apple", "Lemon", "Lime", "Banana"]
    assert records[2].is_disabled is True
    assert records[2].props == {"sku": "L-1"}


def test_load_json_list(tmp_path: Path) -> None:
    path = _write(tmp_path, "options.json", json.dumps(["a", {"content": "b"}]))
    assert [r.content for r in flatten(load_options(path))] == ["a", "b"]


def test_null_entry_is_kept_as_malformed_option() -> None:
    tree = parse_options(["a", None, "c"])
    assert [r.content for r in flatten(tree)] == ["a", "", "c"]


def test_empty_file_yields_no_options(tmp_path: Path) -> None:
    assert load_options(_write(tmp_path, "empty.yaml", "")) == []


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OptionSourceError) as excinfo:
        load_options(tmp_path / "nope.yaml")
    assert excinfo.value.context["path"].endswith("nope.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(OptionSourceError, match="not valid YAML"):
        load_options(_write(tmp_path, "bad.yaml", "options: [unclosed"))


def test_invalid_entry_type_reports_location(tmp_path: Path) -> None:
    path = _write(tmp_path, "bad.yaml", "options:\n  - group: G\n    options:\n      - 42\n")
    with pytest.raises(OptionSourceError) as excinfo:
        load_options(path)
    assert excinfo.value.context["location"] == "options[0].options[0]"
    assert excinfo.value.context["path"].endswith("bad.yaml")


def test_invalid_field_value() -> None:
    with pytest.raises(OptionSourceError, match="Invalid option entry"):
        parse_options([{"content": "x", "disabled": "maybe"}])


def test_top_level_must_be_list() -> None:
    with pytest.raises(OptionSourceError):
        parse_options("just a string")


def test_unreadable_file_becomes_option_source_error(tmp_path: Path) -> None:
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"\xff\xfe\x00")

    with pytest.raises(OptionSourceError, match="could not be read") as excinfo:
        load_options(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert excinfo.value.context["path"].endswith("binary.yaml")


def test_directory_path_becomes_option_source_error(tmp_path: Path) -> None:
    with pytest.raises(OptionSourceError, match="could not be read") as excinfo:
        load_options(tmp_path)
    assert isinstance(excinfo.value.__cause__, OSError)
