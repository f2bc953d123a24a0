"""Tests for settings and logging configuration."""

import json

from feedmark.config.settings import Settings
from feedmark.utils.logger import configure_logging, get_logger


class TestSettings:
    def test_defaults(self):
        config = Settings(_env_file=None)
        assert config.log_level == "INFO"
        assert config.log_json is False
        assert config.xml_recover is True
        assert config.xml_huge_tree is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FEEDMARK_XML_RECOVER", "false")
        monkeypatch.setenv("FEEDMARK_LOG_LEVEL", "debug")
        config = Settings(_env_file=None)
        assert config.xml_recover is False
        assert config.log_level == "debug"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FEEDMARK_LOG_JSON=true\n")
        assert Settings(_env_file=env_file).log_json is True


class TestLogging:
    def test_json_output(self, capsys):
        configure_logging(log_level="INFO", json_format=True)
        get_logger("test").info("Feed parsed", items=3)

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "Feed parsed"
        assert record["items"] == 3
        assert record["logger"] == "test"
        assert record["level"] == "info"

    def test_level_filtering(self, capsys):
        configure_logging(log_level="WARNING", json_format=True)
        get_logger().info("hidden")
        assert "hidden" not in capsys.readouterr().err
