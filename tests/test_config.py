# tests/test_config.py
"""Tests for server configuration."""

import pytest


def test_config_defaults():
    from tgpp_guidance.config import Config

    assert Config.SERVER_VERSION == "2.0.0"
    assert Config.MAX_SUGGESTIONS == 5
    assert Config.CATALOG_CACHE_TTL == 7200


def test_config_validate_passes():
    from tgpp_guidance.config import Config

    assert Config.validate() is True


def test_config_validate_collects_errors(monkeypatch):
    from tgpp_guidance.config import Config

    monkeypatch.setattr(Config, "MAX_SUGGESTIONS", 0)
    monkeypatch.setattr(Config, "CATALOG_CACHE_TTL", -1)

    with pytest.raises(ValueError) as exc_info:
        Config.validate()

    message = str(exc_info.value)
    assert message.startswith("Configuration errors:")
    assert "MAX_SUGGESTIONS must be positive: 0" in message
    assert "CATALOG_CACHE_TTL cannot be negative: -1" in message


def test_config_display():
    from tgpp_guidance.config import Config

    text = Config.display()

    assert "3GPP Guidance Server Configuration" in text
    assert f"Server: {Config.SERVER_NAME} v{Config.SERVER_VERSION}" in text



def test_config_rejects_unknown_log_level(monkeypatch):
    from tgpp_guidance.config import Config

    monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")

    with pytest.raises(ValueError) as exc_info:
        Config.validate()

    assert "LOG_LEVEL must be one of" in str(exc_info.value)
    assert "Log level: CHATTY" in Config.display()
