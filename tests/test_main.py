# tests/test_main.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from omni.cli.main import main
from omni.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def omni_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OMNI_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("OMNI_SKIP_CORRUPTED_LINES", "0")
    monkeypatch.setenv("OMNI_TASKS_PATH", str(tmp_path / "data" / "tasks.txt"))
    return tmp_path / "data"


def test_setup_logging_writes_debug_to_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("omni.tests").debug("hello from test")
    for h in logging.getLogger().handlers:
        h.flush()
    assert log_file == tmp_path / "logs" / "omni.log"
    assert "hello from test" in log_file.read_text("utf-8")


def test_main_runs_session(monkeypatch, omni_env: Path, restore_root_logging, capsys) -> None:
    lines = iter(["todo read book", "bye"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    main()

    out = capsys.readouterr().out
    assert "Helloo!" in out
    assert "Byeee!" in out
    assert (omni_env / "tasks.txt").read_text("utf-8") == "T | read book | 0\n"


def test_main_exits_on_corrupted_file(omni_env: Path, restore_root_logging, capsys) -> None:
    omni_env.mkdir(parents=True)
    (omni_env / "tasks.txt").write_text("Q | what | 0\n", "utf-8")

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 1
    assert "Task type not found." in capsys.readouterr().err
