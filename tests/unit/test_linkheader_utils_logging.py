"""Tests for linkheader logging helpers."""

import logging
import threading
from logging.handlers import RotatingFileHandler

from linkheader import parse
from linkheader.api.config.ParserConfig import ParserConfig
from linkheader.utils import configure_logging, get_logger


class TestConfigureLogging:
    """Test configure_logging."""

    def test_silent_by_default(self, fresh_logging):
        configure_logging()
        assert fresh_logging.level == logging.WARNING
        assert [type(h) for h in fresh_logging.handlers] == [logging.NullHandler]

    def test_env_level(self, fresh_logging, monkeypatch):
        monkeypatch.setenv("LINKHEADER_LOG_LEVEL", "debug")
        configure_logging()
        assert fresh_logging.level == logging.DEBUG

    def test_file_handler(self, fresh_logging, tmp_path):
        log_file = tmp_path / "logs" / "linkheader.log"
        configure_logging("INFO", log_file)
        assert [type(h) for h in fresh_logging.handlers] == [RotatingFileHandler]
        assert log_file.parent.is_dir()

    def test_default_configures_once(self, fresh_logging, monkeypatch):
        configure_logging()
        monkeypatch.setenv("LINKHEADER_LOG_LEVEL", "DEBUG")
        configure_logging()
        assert fresh_logging.level == logging.WARNING
        assert len(fresh_logging.handlers) == 1

    def test_explicit_settings_reconfigure(self, fresh_logging, tmp_path):
        configure_logging("ERROR")
        configure_logging("DEBUG", tmp_path / "linkheader.log")
        assert fresh_logging.level == logging.DEBUG
        assert [type(h) for h in fresh_logging.handlers] == [RotatingFileHandler]

    def test_same_explicit_settings_keep_handler(self, fresh_logging, tmp_path):
        configure_logging("INFO", tmp_path / "linkheader.log")
        (handler,) = fresh_logging.handlers
        configure_logging("info", tmp_path / "linkheader.log")
        assert fresh_logging.handlers == [handler]

    def test_concurrent_first_calls(self, fresh_logging):
        threads = [threading.Thread(target=configure_logging) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(fresh_logging.handlers) == 1


class TestGetLogger:
    """Test get_logger."""

    def test_namespaced(self, fresh_logging):
        assert get_logger("parse").name == "linkheader.parse"
        assert len(fresh_logging.handlers) == 1


class TestParseLogging:
    """Test parse logs through the configured handler."""

    def test_parse_writes_debug_log(self, fresh_logging, tmp_path):
        log_file = tmp_path / "linkheader.log"
        config = ParserConfig(log_level="DEBUG", log_file=str(log_file))
        parse('<u>; rel="next"; rel="wrong"', config=config)
        for handler in fresh_logging.handlers:
            handler.flush()
        content = log_file.read_text()
        assert "Keeping extra rel as param" in content
        assert "Parsed 1 links from Link header" in content

    def test_config_after_lazy_configuration(self, fresh_logging, tmp_path):
        """Test a config's logging settings apply after a plain parse."""
        parse("<u>")
        log_file = tmp_path / "linkheader.log"
        parse('<u>; rel="next"', config=ParserConfig(log_level="DEBUG", log_file=str(log_file)))
        for handler in fresh_logging.handlers:
            handler.flush()
        assert log_file.exists()
        assert "Parsed 1 links from Link header" in log_file.read_text()
