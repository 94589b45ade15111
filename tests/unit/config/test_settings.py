import logging

import pytest
from rich.logging import RichHandler

from bloomkit.config.settings import BloomConfig, load_config, setup_logging


class TestBloomConfig:
    def test_defaults(self):
        """Ensure the dataclass has safe defaults."""
        config = BloomConfig()
        assert config.expected_insertions == 1000
        assert config.fpp == 0.03
        assert config.log_level == "WARNING"
        assert config.seed == 0

    def test_load_from_environment(self, monkeypatch):
        monkeypatch.setenv("BLOOMKIT_EXPECTED_INSERTIONS", "5000")
        monkeypatch.setenv("BLOOMKIT_FPP", "0.001")
        monkeypatch.setenv("BLOOMKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("BLOOMKIT_SEED", "9")

        config = load_config()

        assert config.expected_insertions == 5000
        assert config.fpp == 0.001
        assert config.log_level == "DEBUG"
        assert config.seed == 9

    def test_unparsable_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("BLOOMKIT_EXPECTED_INSERTIONS", "lots")
        monkeypatch.setenv("BLOOMKIT_FPP", "tiny")
        monkeypatch.setenv("BLOOMKIT_LOG_LEVEL", "loud")

        config = load_config()

        assert config.expected_insertions == 1000
        assert config.fpp == 0.03
        assert config.log_level == "WARNING"


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_rich_handler_once(self):
        setup_logging("INFO")
        setup_logging("DEBUG")

        root = logging.getLogger()
        assert sum(isinstance(h, RichHandler) for h in root.handlers) == 1
        assert root.level == logging.DEBUG
