"""Tests for models/configuration.py."""

from stableid.models.configuration import DEFAULT_LOG_LEVEL, Configuration


def test_defaults(monkeypatch):
    monkeypatch.delenv("STABLEID_LOG_LEVEL", raising=False)
    cfg = Configuration()
    assert cfg.log_level == DEFAULT_LOG_LEVEL
    assert cfg.allowed_schemes == ("http", "https")


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("STABLEID_LOG_LEVEL", "DEBUG")
    assert Configuration().log_level == "DEBUG"


def test_to_dict(monkeypatch):
    monkeypatch.delenv("STABLEID_LOG_LEVEL", raising=False)
    d = Configuration().to_dict()
    assert d == {"log_level": "WARNING", "allowed_schemes": ["http", "https"]}
