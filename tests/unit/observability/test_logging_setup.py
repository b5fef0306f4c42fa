"""Unit tests for the structlog logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from listquery.application.search import FilterCompiler
from listquery.config.settings import SearchSettings
from listquery.observability.logging import JsonLoggerFactory, add_component, get_logger


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestAddComponent:
    def test_stamps_component(self) -> None:
        processor = add_component("listquery")
        assert processor(None, "info", {"event": "x"}) == {"event": "x", "component": "listquery"}

    def test_keeps_existing_value(self) -> None:
        processor = add_component("listquery")
        assert processor(None, "info", {"component": "api"})["component"] == "api"


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("listquery.test", entity="Doctor").info("searched", filtered_count=3)
        assert logs == [{"entity": "Doctor", "filtered_count": 3, "event": "searched", "log_level": "info"}]

    def test_compiler_logs_ignored_keys(self, doctor_schema) -> None:
        with capture_logs() as logs:
            FilterCompiler().build_predicate(doctor_schema, {"contains_LastName": "x"})
        assert {"event": "filter_key_ignored", "key": "contains_LastName", "entity": "Doctor", "log_level": "debug"} in logs


class TestJsonLoggerFactory:
    def test_renders_json_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("DEBUG", component="listquery")
        get_logger("listquery.test").info("search_compiled", filtered_count=3)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "search_compiled"
        assert payload["filtered_count"] == 3
        assert payload["component"] == "listquery"
        assert payload["level"] == "info"
        assert payload["logger"] == "listquery.test"
        assert "timestamp" in payload

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("INFO", json_output=False)
        get_logger("listquery.test").info("search_compiled", filtered_count=3)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert "search_compiled" in line
        assert "filtered_count=3" in line
        with pytest.raises(json.JSONDecodeError):
            json.loads(line)

    def test_level_accepts_int(self) -> None:
        JsonLoggerFactory.configure(logging.ERROR)
        assert logging.getLogger().level == logging.ERROR

    def test_from_settings(self) -> None:
        JsonLoggerFactory.from_settings(SearchSettings(log_level="warning"))
        assert logging.getLogger().level == logging.WARNING
