# tests/core/test_log.py

import io
import json
import logging

import pytest
import structlog

from cleanconfig.core.config.settings import LoggingSettings
from cleanconfig.core.log import configure_from_settings, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def test_json_renderer_emits_one_object_per_line():
    stream = io.StringIO()
    configure_logging(level="DEBUG", json=True, stream=stream, cache=False)

    get_logger("cleanconfig.test").info("registry.built", properties=3)

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "registry.built"
    assert record["properties"] == 3
    assert record["level"] == "info"
    assert record["logger"] == "cleanconfig.test"
    assert "timestamp" in record


def test_level_filters_lower_events():
    stream = io.StringIO()
    configure_logging(level="WARNING", json=True, stream=stream, cache=False)

    log = get_logger("cleanconfig.test")
    log.debug("validation.completed")
    log.warning("validation.cache_full", max_size=1)

    lines = stream.getvalue().strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "validation.cache_full"


def test_configure_from_settings_sets_root_level():
    configure_from_settings(LoggingSettings(level="ERROR", json=False))
    assert logging.getLogger().level == logging.ERROR
