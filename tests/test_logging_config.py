"""
Tests for versionid.logging_config.
"""

import io
import json
import logging
import sys

from versionid import Version
from versionid.logging_config import (
    ConsoleFormatter,
    JSONFormatter,
    LOGGER_NAME,
    configure_logging,
)
from versionid.settings import VersionIdSettings


def _make_record(msg="hello", exc_info=None):
    return logging.LogRecord(
        name="versionid.version",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Tests for JSONFormatter"""

    def test_record_fields(self):
        """Test the JSON object carries the standard fields"""
        data = json.loads(JSONFormatter().format(_make_record()))

        assert data["level"] == "DEBUG"
        assert data["logger"] == "versionid.version"
        assert data["message"] == "hello"
        assert data["line"] == 10
        assert data["timestamp"].endswith("Z")
        assert "exception" not in data

    def test_exception_included(self):
        """Test exception info is formatted into the record"""
        try:
            raise ValueError("boom")
        except ValueError:
            record = _make_record(exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestConfigureLogging:
    """Tests for configure_logging"""

    def test_console_configuration(self):
        """Test the default console handler setup"""
        logger = configure_logging(VersionIdSettings(log_level="INFO"))

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, ConsoleFormatter)

    def test_json_configuration(self):
        """Test the JSON handler setup"""
        logger = configure_logging(VersionIdSettings(log_format="json"))
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_reconfigure_replaces_handlers(self):
        """Test repeated calls do not stack handlers"""
        configure_logging(VersionIdSettings())
        logger = configure_logging(VersionIdSettings())
        assert len(logger.handlers) == 1

    def test_uses_environment_settings_by_default(self, monkeypatch):
        """Test settings are loaded from the environment when omitted"""
        monkeypatch.setenv("VERSIONID_LOG_LEVEL", "ERROR")
        logger = configure_logging()
        assert logger.level == logging.ERROR

    def test_rejected_segment_emitted_as_json(self):
        """Test parse diagnostics reach the configured handler"""
        logger = configure_logging(
            VersionIdSettings(log_level="DEBUG", log_format="json")
        )
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)

        assert Version.try_parse("1.x") is None

        data = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert data["logger"] == "versionid.version"
        assert "'x'" in data["message"]
