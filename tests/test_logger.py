"""Tests for udotenv.logger module."""

import json
import logging
import os
from unittest import mock

import pytest

from udotenv.logger import Logger, StructuredLogger, create_logger, get_logger


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        with pytest.raises(TypeError):
            Logger()  # type: ignore

    def test_logger_has_required_methods(self):
        for method in ("debug", "info", "warning", "error", "critical"):
            assert hasattr(Logger, method)


class TestStructuredLogger:
    """Tests for the StructuredLogger implementation."""

    def test_text_format_goes_to_stderr(self, capsys):
        logger = StructuredLogger(name="test-text", json_format=False)
        logger.info("Test message")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "INFO" in captured.err
        assert "Test message" in captured.err
        assert "test-text" in captured.err

    def test_json_format(self, capsys):
        logger = StructuredLogger(name="test-json", json_format=True)
        logger.info("Test message", paths=["a.env", "b.env"], overload=True)

        log_entry = json.loads(capsys.readouterr().err.strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["message"] == "Test message"
        assert log_entry["logger"] == "test-json"
        assert log_entry["paths"] == ["a.env", "b.env"]
        assert log_entry["overload"] is True

    def test_text_includes_extras(self, capsys):
        logger = StructuredLogger(name="test-text-extras")
        logger.info("Test message", key="value")

        assert "key=value" in capsys.readouterr().err

    def test_respects_level(self, capsys):
        logger = StructuredLogger(name="test-level", level=logging.WARNING)
        logger.debug("Hidden debug")
        logger.info("Hidden info")
        logger.error("Shown error")

        err = capsys.readouterr().err
        assert "Hidden" not in err
        assert "Shown error" in err

    def test_reserved_kwargs_prefixed(self, capsys):
        logger = StructuredLogger(name="test-reserved", json_format=True)
        logger.info("Test", name="should be prefixed")

        log_entry = json.loads(capsys.readouterr().err.strip())
        assert "_name" in log_entry
        assert log_entry["logger"] == "test-reserved"

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "udotenv.log"
        logger = StructuredLogger(name="test-file", log_file=str(log_file))
        logger.warning("File test message")

        for handler in logging.getLogger("test-file").handlers:
            handler.flush()

        assert "File test message" in log_file.read_text()

    def test_reinitialising_does_not_duplicate(self, capsys):
        StructuredLogger(name="test-dup")
        logger = StructuredLogger(name="test-dup")
        logger.info("once")

        assert capsys.readouterr().err.count("once") == 1


class TestLoggerFactoryFunctions:
    """Tests for create_logger and get_logger."""

    def test_create_logger_returns_logger(self):
        assert isinstance(create_logger(name="test-factory"), Logger)

    def test_default_level_is_warning(self, capsys):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("TEST_QUIET_LOG_LEVEL", None)
            logger = create_logger(name="test-quiet")
        logger.info("Should not appear")
        logger.warning("Should appear")

        err = capsys.readouterr().err
        assert "Should not appear" not in err
        assert "Should appear" in err

    def test_get_logger_reads_env_level(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_PROJECT_LOG_LEVEL": "DEBUG"}):
            logger = get_logger("test-project")
            logger.debug("Debug appears")

        assert "Debug appears" in capsys.readouterr().err

    def test_get_logger_reads_env_json(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_JSON_ENV_LOG_JSON": "true", "TEST_JSON_ENV_LOG_LEVEL": "INFO"}):
            logger = get_logger("test-json-env")
            logger.info("JSON env test")

        log_entry = json.loads(capsys.readouterr().err.strip())
        assert log_entry["message"] == "JSON env test"
