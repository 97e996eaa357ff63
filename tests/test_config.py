"""Tests for environment configuration and logging setup."""

import logging

import pytest

from motif_neighbors.config import Settings, configure_logging, load_settings


class TestLoadSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "MOTIF_DATA_DIR",
            "MOTIF_API_HOST",
            "MOTIF_API_PORT",
            "MOTIF_CORS_ORIGINS",
            "MOTIF_DISTANCE_PRECISION",
            "MOTIF_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = load_settings()
        assert settings == Settings()
        assert settings.validate() == []

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MOTIF_DATA_DIR", "/srv/data")
        monkeypatch.setenv("MOTIF_API_PORT", "9000")
        monkeypatch.setenv("MOTIF_CORS_ORIGINS", "http://a.org, http://b.org")
        monkeypatch.setenv("MOTIF_DISTANCE_PRECISION", "2")
        monkeypatch.setenv("MOTIF_LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.data_dir == "/srv/data"
        assert settings.port == 9000
        assert settings.cors_origins == ("http://a.org", "http://b.org")
        assert settings.distance_precision == 2
        assert settings.log_level == "DEBUG"

    def test_bad_integer(self, monkeypatch):
        monkeypatch.setenv("MOTIF_API_PORT", "eighty")
        with pytest.raises(ValueError, match="MOTIF_API_PORT"):
            load_settings()


class TestValidate:
    def test_reports_each_issue(self):
        issues = Settings(
            port=0, distance_precision=-1, log_level="LOUD", cors_origins=()
        ).validate()
        assert len(issues) == 4


class TestConfigureLogging:
    def test_single_handler(self):
        logger = configure_logging("DEBUG")
        configure_logging("WARNING")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
