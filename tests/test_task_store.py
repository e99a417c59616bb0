# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from trackerbot.errors import CorruptSaveFileError, ErrorKind, StorageReadError, StorageWriteError
from trackerbot.tasks.task_models import Deadline, Event, Todo, serialize
from trackerbot.tasks.task_store import TaskStore


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    assert TaskStore(tmp_path / "nope" / "data.txt").load() == []


def test_save_creates_parent_and_load_reads_back(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "data.txt"
    store = TaskStore(path)
    tasks = [
        Todo("buy milk"),
        Deadline("submit report", datetime(2024, 12, 1), done=True),
        Event("trip", datetime(2024, 1, 1), datetime(2024, 1, 2)),
    ]

    store.save(tasks)

    assert path.read_text("utf-8") == (
        "T|0|buy milk\n"
        "D|1|submit report|1733011200\n"
        "E|0|trip|1704067200|1704153600\n"
    )
    loaded = store.load()
    assert loaded == tasks
    assert [serialize(t) for t in loaded] == [serialize(t) for t in tasks]
    assert not path.with_name("data.txt.tmp").exists()


def test_save_overwrites_previous_content(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "data.txt")
    store.save([Todo("a"), Todo("b")])
    store.save([Todo("c")])
    assert store.load() == [Todo("c")]


def test_blank_lines_and_crlf_are_tolerated(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_bytes(b"T|0|a\r\n\r\nT|1|b\n\n")
    assert TaskStore(path).load() == [Todo("a"), Todo("b", done=True)]


@pytest.mark.parametrize(
    ("content", "line_no"),
    [
        ("T|0|a\nT|0\n", 2),
        ("T|0|a\nQ|0|b\n", 2),
        ("D|0|a|tomorrow\n", 1),
        ("T|0|a\n\nE|0|b|1704067200\n", 3),
    ],
)
def test_corrupt_record_fails_whole_load(tmp_path: Path, content: str, line_no: int) -> None:
    path = tmp_path / "data.txt"
    path.write_text(content, "utf-8")

    with pytest.raises(CorruptSaveFileError) as exc:
        TaskStore(path).load()
    assert exc.value.line_no == line_no
    assert exc.value.kind == ErrorKind.DATA


def test_write_failure_raises_storage_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", "utf-8")
    store = TaskStore(blocker / "data.txt")

    with pytest.raises(StorageWriteError) as exc:
        store.save([Todo("a")])
    assert exc.value.kind == ErrorKind.IO


def test_quarantine_moves_file_aside(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("garbage\n", "utf-8")
    store = TaskStore(path)

    moved = store.quarantine()
    assert moved == tmp_path / "data.txt.corrupt"
    assert not path.exists()
    assert moved.read_text("utf-8") == "garbage\n"
    assert store.quarantine() is None


def test_quarantine_never_replaces_an_earlier_backup(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    store = TaskStore(path)

    path.write_text("T|0|first|bad\n", "utf-8")
    first = store.quarantine()
    path.write_text("T|0|second|bad\n", "utf-8")
    second = store.quarantine()

    assert first == tmp_path / "data.txt.corrupt"
    assert second == tmp_path / "data.txt.corrupt.1"
    assert first.read_text("utf-8") == "T|0|first|bad\n"
    assert second.read_text("utf-8") == "T|0|second|bad\n"


def test_unreadable_file_is_a_read_error_not_corruption(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.mkdir()

    with pytest.raises(StorageReadError) as exc:
        TaskStore(path).load()
    assert exc.value.kind == ErrorKind.IO


def test_undecodable_file_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_bytes(b"T|0|\xff\xfe\n")

    with pytest.raises(CorruptSaveFileError):
        TaskStore(path).load()


def test_non_canonical_epoch_token_fails_load(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("D|0|x|01733011200\n", "utf-8")

    with pytest.raises(CorruptSaveFileError):
        TaskStore(path).load()
