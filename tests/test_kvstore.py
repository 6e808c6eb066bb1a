# tests/test_kvstore.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from clitask.errors import StorageError
from clitask.kvstore import KeyValueStore


def test_missing_file_is_empty_store(tmp_path: Path) -> None:
    db = KeyValueStore(tmp_path / "none.json")
    assert len(db) == 0
    assert db.get("1") is None
    assert not (tmp_path / "none.json").exists()


def test_set_is_dumped_immediately(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "db.json"
    db = KeyValueStore(path)
    db.set("1", "Test Task")

    assert json.loads(path.read_text("utf-8")) == {"1": "Test Task"}
    assert KeyValueStore(path).get("1") == "Test Task"


def test_rem_exists_and_iteration(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    db = KeyValueStore(path)
    db.set("a", 1)
    db.set("b", [1, 2])

    assert db.exists("a")
    assert "b" in db
    assert sorted(db) == ["a", "b"]
    assert dict(db.items()) == {"a": 1, "b": [1, 2]}

    assert db.rem("a") is True
    assert db.rem("a") is False
    assert not db.exists("a")
    assert json.loads(path.read_text("utf-8")) == {"b": [1, 2]}


def test_without_auto_dump_context_exit_flushes(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    with KeyValueStore(path, auto_dump=False) as db:
        db.set("1", "x")
        assert not path.exists()
    assert json.loads(path.read_text("utf-8")) == {"1": "x"}


def test_context_exit_flushes_on_exception(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    with pytest.raises(RuntimeError):
        with KeyValueStore(path, auto_dump=False) as db:
            db.set("1", "x")
            raise RuntimeError("boom")
    assert KeyValueStore(path).get("1") == "x"


def test_no_tmp_file_left_behind(tmp_path: Path) -> None:
    db = KeyValueStore(tmp_path / "db.json")
    db.set("1", "x")
    assert [p.name for p in tmp_path.iterdir()] == ["db.json"]


def test_corrupt_json_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    path.write_text("{not json", "utf-8")
    with pytest.raises(StorageError):
        KeyValueStore(path)


def test_non_object_json_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    path.write_text("[1, 2, 3]", "utf-8")
    with pytest.raises(StorageError):
        KeyValueStore(path)


def test_unserializable_value_raises_storage_error(tmp_path: Path) -> None:
    db = KeyValueStore(tmp_path / "db.json")
    with pytest.raises(StorageError):
        db.set("1", object())
