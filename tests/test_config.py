# tests/test_config.py

import pytest
from unimatch.core.config import env_float


def test_env_float_reads_value(monkeypatch):
    monkeypatch.setenv("DIAGNOSTIC_API_TIMEOUT", "12.5")
    assert env_float("DIAGNOSTIC_API_TIMEOUT", None) == 12.5


@pytest.mark.parametrize("raw", ["", "   "])
def test_env_float_blank_uses_default(monkeypatch, raw):
    monkeypatch.setenv("MATCH_THRESHOLD", raw)
    assert env_float("MATCH_THRESHOLD", 70.0) == 70.0


def test_env_float_unset_uses_default(monkeypatch):
    monkeypatch.delenv("DIAGNOSTIC_API_TIMEOUT", raising=False)
    assert env_float("DIAGNOSTIC_API_TIMEOUT", None) is None


@pytest.mark.parametrize("raw", ["seventy", "70%", "10s"])
def test_env_float_malformed_uses_default(monkeypatch, raw):
    monkeypatch.setenv("MATCH_THRESHOLD", raw)
    assert env_float("MATCH_THRESHOLD", 70.0) == 70.0
