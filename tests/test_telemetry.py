from __future__ import annotations

import pytest

from textarea_engine.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("textarea_engine.tests") is telemetry.get_logger(
        "textarea_engine.tests"
    )


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("tests::event", level="loud")


def test_span_reraises_and_records_metadata() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("tests::span", metadata={"step": 1}) as handle:
            handle.add_metadata("extra", [1, 2])
            assert handle.metadata == {"step": "1", "extra": "[1, 2]"}
            raise RuntimeError("boom")
