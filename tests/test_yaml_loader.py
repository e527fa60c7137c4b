"""Tests for YAML loading and atomic saving."""

from pathlib import Path

import pytest

from hapi_generator.helpers.yaml_loader import YAMLError, load_yaml_file, save_yaml_file


def test_load_returns_plain_containers(tmp_path: Path) -> None:
    path = tmp_path / "doc.yaml"
    path.write_text("a:\n  b: [1, 2]\n", encoding="utf-8")

    data = load_yaml_file(path)

    assert data == {"a": {"b": [1, 2]}}
    assert type(data) is dict
    assert type(data["a"]["b"]) is list  # type: ignore[index]


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_yaml_file(tmp_path / "missing.yaml")


def test_load_invalid_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "doc.yaml"
    path.write_text("a: [1, 2\n", encoding="utf-8")

    with pytest.raises(YAMLError):
        load_yaml_file(path)


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "doc.yaml"

    save_yaml_file({"name": "joi", "items": ["a", "b"]}, path)

    assert load_yaml_file(path) == {"name": "joi", "items": ["a", "b"]}
    assert [p.name for p in path.parent.iterdir()] == ["doc.yaml"]
