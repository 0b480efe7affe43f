# tests/test_manager.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from taskline import manager as manager_module
from taskline.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
    StorageWriteFailedError,
)
from taskline.manager import TaskManager, parse_position
from taskline.schema import Document, decode_document


# ---- loader ----

def test_load_without_store_creates_one(manager: TaskManager, store_path: Path) -> None:
    assert not store_path.exists()

    doc = manager.load()

    assert doc.lists == {}
    assert store_path.exists()
    assert decode_document(store_path.read_bytes()).lists == {}


def test_corrupt_store_is_backed_up_and_replaced(manager: TaskManager, store_path: Path) -> None:
    original = b"\x00\x01 this is not a document {"
    store_path.write_bytes(original)

    doc = manager.load()

    assert doc.lists == {}
    assert manager.backup_path == store_path.with_name("tasks.json.bak")
    assert manager.backup_path.read_bytes() == original

    # the fresh store loads cleanly and the backup is left alone
    again = manager.load()
    assert again.lists == {}
    assert decode_document(store_path.read_bytes()).lists == {}
    assert manager.backup_path.read_bytes() == original


def test_corruption_overwrites_previous_backup(manager: TaskManager, store_path: Path) -> None:
    manager.backup_path.write_bytes(b"old backup")
    store_path.write_bytes(b"[1, 2, 3]")

    manager.load()

    assert manager.backup_path.read_bytes() == b"[1, 2, 3]"


def test_store_without_lists_is_not_rewritten_on_load(manager: TaskManager, store_path: Path) -> None:
    store_path.write_text('{"other": 1}', encoding="utf-8")

    doc = manager.load()

    assert doc.lists == {}
    assert store_path.read_text(encoding="utf-8") == '{"other": 1}'
    assert not manager.backup_path.exists()

    # next save includes the injected mapping
    manager.create_list("work")
    assert decode_document(store_path.read_bytes()).lists == {"work": []}


def test_unreadable_store_loads_empty(tmp_path: Path) -> None:
    # a directory in place of the store file cannot be read
    manager = TaskManager(store_path=tmp_path)
    doc = manager.load()

    assert doc.lists == {}
    assert doc.read_only is True
    with pytest.raises(StorageWriteFailedError):
        manager.create_list("work")


def test_corrupt_store_kept_when_backup_fails(
    manager: TaskManager, store_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    original = b"{damaged but precious"
    store_path.write_bytes(original)

    def refuse(src, dst):
        raise PermissionError("read-only directory")

    monkeypatch.setattr(os, "replace", refuse)

    assert manager.load().read_only is True
    with pytest.raises(StorageWriteFailedError):
        manager.add_task("work", "x")

    assert store_path.read_bytes() == original
    assert not manager.backup_path.exists()


# ---- writer ----

def test_save_overwrites_store(manager: TaskManager, store_path: Path) -> None:
    doc = manager.load()
    doc.lists["work"] = []

    assert manager.save(doc) is True
    assert list(decode_document(store_path.read_bytes()).lists) == ["work"]


def test_save_reports_unwritable_path(tmp_path: Path) -> None:
    manager = TaskManager(store_path=tmp_path)
    assert manager.save(Document()) is False


def test_save_reports_encode_failure(
    manager: TaskManager, store_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager.create_list("work")
    before = store_path.read_bytes()

    def broken(doc):
        raise ValueError("cannot serialize")

    monkeypatch.setattr(manager_module, "encode_document", broken)

    assert manager.save(manager.load()) is False
    assert store_path.read_bytes() == before


def test_failed_save_raises_on_commands(manager: TaskManager, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(manager, "save", lambda doc: False)

    with pytest.raises(StorageWriteFailedError):
        manager.create_list("work")


# ---- commands ----

def test_end_to_end_scenario(manager: TaskManager) -> None:
    manager.create_list("work")
    assert manager.add_task("work", "buy milk") is False

    rows = manager.list_tasks("work")
    assert [(r.position, r.text, r.done) for r in rows] == [(1, "buy milk", False)]
    assert rows[0].created_short.startswith("[")

    manager.mark_done("work", 1)
    rows = manager.list_tasks("work")
    assert [(r.position, r.text, r.done) for r in rows] == [(1, "buy milk", True)]

    manager.remove_task("work", 1)
    assert manager.list_tasks("work") == []


def test_commands_persist_between_managers(store_path: Path) -> None:
    TaskManager(store_path).add_task("home", "water plants")
    TaskManager(store_path).create_list("work")

    manager = TaskManager(store_path)
    assert manager.list_all_lists() == ["home", "work"]

    manager.delete_list("home")
    assert TaskManager(store_path).list_all_lists() == ["work"]


def test_add_task_reports_auto_creation(manager: TaskManager) -> None:
    assert manager.add_task("newlist", "text") is True
    assert len(manager.list_tasks("newlist")) == 1


def test_command_errors(manager: TaskManager) -> None:
    manager.create_list("work")
    manager.add_task("work", "A")

    with pytest.raises(AlreadyExistsError):
        manager.create_list("work")
    with pytest.raises(NotFoundError):
        manager.list_tasks("nope")
    with pytest.raises(NotFoundError):
        manager.delete_list("nope")
    with pytest.raises(OutOfRangeError):
        manager.mark_done("work", "2")
    with pytest.raises(InvalidArgumentError):
        manager.remove_task("work", "0")

    assert manager.list_all_lists() == ["work"]
    assert len(manager.list_tasks("work")) == 1


def test_positions_accept_string_tokens(manager: TaskManager) -> None:
    for text in ("A", "B", "C"):
        manager.add_task("work", text)

    manager.remove_task("work", "2")
    assert [r.text for r in manager.list_tasks("work")] == ["A", "C"]


def test_bad_position_token_fails_before_touching_disk(manager: TaskManager, store_path: Path) -> None:
    with pytest.raises(InvalidArgumentError):
        manager.remove_task("work", "abc")
    assert not store_path.exists()


@pytest.mark.parametrize("value, expected", [(3, 3), ("3", 3), (" 7 ", 7), ("-1", -1)])
def test_parse_position(value, expected: int) -> None:
    assert parse_position(value) == expected


@pytest.mark.parametrize("value", ["", "one", "1.5"])
def test_parse_position_rejects_non_integers(value: str) -> None:
    with pytest.raises(InvalidArgumentError):
        parse_position(value)
