"""Tests for config and logging."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from segment_explorer.config import DEFAULT_TABLE_LIMIT, ExplorerConfig, UpstreamConfig, ViewConfig
from segment_explorer.exceptions import ConfigurationError
from segment_explorer.logging import JsonFormatter, get_logger, setup_logging


class TestUpstreamConfig:
    """Tests for UpstreamConfig."""

    def test_default_values(self) -> None:
        config = UpstreamConfig()

        assert config.base_url == "http://localhost:5000"
        assert config.endpoint == "/get-clusters"
        assert config.timeout_seconds == 10.0
        assert config.max_retries == 3


class TestViewConfig:
    """Tests for ViewConfig."""

    def test_default_values(self) -> None:
        config = ViewConfig()

        assert config.table_limit == DEFAULT_TABLE_LIMIT == 10
        assert config.strict_ingestion is False


class TestExplorerConfig:
    """Tests for ExplorerConfig."""

    def test_default_values(self) -> None:
        config = ExplorerConfig()

        assert isinstance(config.upstream, UpstreamConfig)
        assert isinstance(config.view, ViewConfig)
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = ExplorerConfig.from_env()

        assert config.upstream.url == "http://localhost:5000/get-clusters"
        assert config.view.table_limit == 10
        assert config.seed is None

    def test_from_env_custom_values(self) -> None:
        env = {
            "CLUSTER_SERVICE_URL": "http://segments:8000",
            "CLUSTER_SERVICE_ENDPOINT": "/v2/clusters",
            "CLUSTER_SERVICE_TIMEOUT": "2.5",
            "CLUSTER_SERVICE_RETRIES": "0",
            "TABLE_ROW_LIMIT": "25",
            "STRICT_INGESTION": "TRUE",
            "SEED": "7",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ExplorerConfig.from_env()

        assert config.upstream.url == "http://segments:8000/v2/clusters"
        assert config.upstream.timeout_seconds == 2.5
        assert config.upstream.max_retries == 0
        assert config.view.table_limit == 25
        assert config.view.strict_ingestion is True
        assert config.seed == 7
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("CLUSTER_SERVICE_TIMEOUT", "soon"),
            ("CLUSTER_SERVICE_RETRIES", "-1"),
            ("TABLE_ROW_LIMIT", "ten"),
            ("TABLE_ROW_LIMIT", "-5"),
            ("SEED", "abc"),
        ],
    )
    def test_from_env_invalid_values(self, name: str, value: str) -> None:
        with patch.dict(os.environ, {name: value}, clear=True):
            with pytest.raises(ConfigurationError, match=name):
                ExplorerConfig.from_env()


class TestLogging:
    """Tests for logging setup."""

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("segment_explorer").setLevel(logging.NOTSET)

    def test_setup_logging_level(self) -> None:
        setup_logging(level="WARNING")

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("segment_explorer").level == logging.WARNING

    def test_setup_logging_invalid_level(self) -> None:
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_logs_to_stderr(self) -> None:
        setup_logging()

        assert logging.getLogger().handlers[0].stream is sys.stderr

    def test_external_loggers_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="test.logger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Loaded %d records",
            args=(5,),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Loaded 5 records"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"cluster": 3}

        assert json.loads(JsonFormatter().format(record))["cluster"] == 3


class TestGetLogger:
    """Tests for get_logger."""

    def test_get_logger(self) -> None:
        logger = get_logger("segment_explorer.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "segment_explorer.test"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")


class TestPackageInit:
    """Tests for segment_explorer __init__.py."""

    def test_version_exported(self) -> None:
        from segment_explorer import __version__

        assert isinstance(__version__, str)
