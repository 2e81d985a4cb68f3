from __future__ import annotations

import io

import pytest
from loguru import logger

from testhttp.application.ports.logger import LoggerPort
from testhttp.infrastructure.logging.log_setup import setup_console_logging
from testhttp.infrastructure.logging.loguru_logger import LoguruLogger


@pytest.fixture
def records():
    captured = []
    logger.enable("testhttp")
    sink_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    yield captured
    logger.remove(sink_id)
    logger.disable("testhttp")


def test_event_name_is_message_and_fields_are_extra(records) -> None:
    LoguruLogger().info("http.response", status=200, url="http://api.test")

    record = records[-1]
    assert record["message"] == "http.response"
    assert record["level"].name == "INFO"
    assert record["extra"]["status"] == 200
    assert record["extra"]["type"] == "http.response"


def test_bind_attaches_fields_to_every_event(records) -> None:
    bound = LoguruLogger().bind(scenario_id="s-1")

    bound.debug("step.start", step="I make the request")
    bound.error("step.failed")

    assert [r["extra"]["scenario_id"] for r in records] == ["s-1", "s-1"]
    assert [r["level"].name for r in records] == ["DEBUG", "ERROR"]


def test_bind_does_not_change_parent(records) -> None:
    parent = LoguruLogger()
    parent.bind(scenario_id="s-1")

    parent.info("scenario.end")

    assert "scenario_id" not in records[-1]["extra"]


def test_library_is_silent_until_enabled() -> None:
    captured = []
    sink_id = logger.add(lambda message: captured.append(message), level="DEBUG")
    try:
        LoguruLogger().info("http.request")
    finally:
        logger.remove(sink_id)

    assert captured == []


def test_setup_console_logging_enables_library_output() -> None:
    stream = io.StringIO()
    try:
        setup_console_logging(level="info", sink=stream)
        LoguruLogger().info("scenario.start", step_count=3)
        LoguruLogger().debug("request.created")
    finally:
        logger.remove()
        logger.disable("testhttp")

    output = stream.getvalue()
    assert "scenario.start" in output
    assert "step_count" in output
    assert "request.created" not in output


def test_logger_port_methods() -> None:
    assert LoggerPort.__abstractmethods__ == frozenset({"debug", "info", "error", "bind"})
    assert not LoguruLogger.__abstractmethods__
