from __future__ import annotations

import pytest

from rediff_engine.editor import Editor
from rediff_engine.runtime import telemetry


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("rediff_engine.tests") is telemetry.get_logger(
        "rediff_engine.tests"
    )


def test_span_collects_metadata() -> None:
    with telemetry.span(
        "tests::span", component="tests", metadata={"count": 3}
    ) as handle:
        handle.add_metadata("status", "ok")

    assert handle.metadata == {"count": "3", "status": "ok"}
    assert handle.component_name == "tests"


def test_span_reraises_failures() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("tests::failing"):
            raise RuntimeError("boom")


def test_failed_edit_keeps_selection() -> None:
    editor = Editor.from_text("abc")
    editor.select_all()

    with pytest.raises(RuntimeError):
        with editor._transaction("explode"):
            raise RuntimeError("edit failed")

    assert editor.selection_range() == (0, 3)


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("tests.event", level="shout")
