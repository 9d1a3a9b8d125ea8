# tests/test_console_connector.py

from __future__ import annotations

import io

from omni.connectors.console_connector import HORIZONTAL_LINE, ConsoleSink, run_console_loop

from .fakes import RecordingSink


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_loop_stops_on_bye(monkeypatch, state, registry) -> None:
    _feed(monkeypatch, ["todo read", "", "bye", "todo never"])
    sink = RecordingSink()

    run_console_loop(state, registry, sink)

    assert sink.shown[0].startswith("Helloo! I'm Omni!")
    assert "Got it. I've added this task:" in sink.shown[1]
    assert sink.shown[2] == "Byeee! See you in a bit!"
    assert len(sink.shown) == 3
    assert state.tasks.size() == 1


def test_loop_stops_on_eof(monkeypatch, state, registry) -> None:
    _feed(monkeypatch, ["list"])
    sink = RecordingSink()
    run_console_loop(state, registry, sink)
    assert sink.shown[-1] == "You have no tasks... Add one!"


def test_console_sink_frames_and_indents() -> None:
    out = io.StringIO()
    ConsoleSink(out).show("line one\nline two")
    assert out.getvalue() == f"{HORIZONTAL_LINE}\n    line one\n    line two\n{HORIZONTAL_LINE}\n\n"
