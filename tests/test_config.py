"""
Tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from ip2c.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("IP2C_BASE_URL", raising=False)
    monkeypatch.delenv("IP2C_TIMEOUT", raising=False)
    s = Settings(_env_file=None)
    assert s.base_url == "https://ip2c.org"
    assert s.timeout is None
    assert s.log_level == "warning"


def test_env_override(monkeypatch):
    monkeypatch.setenv("IP2C_BASE_URL", "http://localhost:9000")
    monkeypatch.setenv("IP2C_TIMEOUT", "2.5")
    monkeypatch.setenv("IP2C_LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.base_url == "http://localhost:9000"
    assert s.timeout == 2.5
    assert s.log_level == "debug"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="loud")


def test_non_positive_timeout():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, timeout=0)
