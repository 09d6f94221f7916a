"""Tests for the API key check"""
from eunoia import config
from eunoia.api.auth import is_known_key


def test_known_key(monkeypatch):
    """Test a configured key is accepted"""
    monkeypatch.setattr(config, "API_KEYS", ["key_1", "key_2"])

    assert is_known_key("key_2") is True


def test_unknown_key(monkeypatch):
    """Test prefixes and unknown keys are rejected"""
    monkeypatch.setattr(config, "API_KEYS", ["key_1"])

    assert is_known_key("key_") is False
    assert is_known_key("key_12") is False


def test_no_keys_configured(monkeypatch):
    """Test nothing is accepted when API_KEYS is empty"""
    monkeypatch.setattr(config, "API_KEYS", [])

    assert is_known_key("key_1") is False
