# tests/test_main.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from trackerbot.cli import main as main_mod
from trackerbot.tasks.task_models import Todo
from trackerbot.tasks.task_store import TaskStore


@pytest.fixture()
def run_main(settings: SimpleNamespace, monkeypatch: pytest.MonkeyPatch):
    """Run main() against tmp settings with a scripted console loop."""
    printed: list[str] = []
    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)
    monkeypatch.setattr(main_mod, "setup_logging", lambda **_: None)
    monkeypatch.setattr("builtins.print", lambda *a, **_: printed.append(" ".join(map(str, a))))

    def _run(loop) -> list[str]:
        monkeypatch.setattr(main_mod, "run_console_loop", loop)
        main_mod.main()
        return printed

    return _run


def test_no_changes_means_no_shutdown_save(settings, run_main) -> None:
    run_main(lambda state: None)
    assert not settings.save_path.exists()


def test_changes_are_saved_on_shutdown(settings, run_main) -> None:
    def loop(state) -> None:
        state.tasks.add(Todo("keep me"))
        state.dirty = True

    run_main(loop)
    assert settings.save_path.read_text("utf-8") == "T|0|keep me\n"


def test_corrupt_file_survives_failed_quarantine(settings, run_main, monkeypatch) -> None:
    settings.save_path.parent.mkdir(parents=True)
    settings.save_path.write_text("T|0|precious\nT|0|broken|extra\n", "utf-8")
    monkeypatch.setattr(TaskStore, "quarantine", lambda self: None)

    def loop(state) -> None:
        state.tasks.add(Todo("new"))
        state.dirty = True

    printed = run_main(loop)

    assert "precious" in settings.save_path.read_text("utf-8")
    assert any("left untouched" in line for line in printed)
    assert not any(".corrupt" in line for line in printed)


def test_quarantined_file_is_reported_by_its_real_path(settings, run_main) -> None:
    settings.save_path.parent.mkdir(parents=True)
    settings.save_path.write_text("T|0|broken|extra\n", "utf-8")

    printed = run_main(lambda state: None)

    assert any(str(settings.save_path) + ".corrupt" in line for line in printed)
    assert any("damaged" in line for line in printed)
