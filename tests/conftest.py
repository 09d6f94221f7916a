"""Global test fixtures and utilities for eunoia tests"""
import pytest
from datetime import datetime, timedelta
from itertools import count

from eunoia import config
from eunoia.models.entry import Entry, Mood


# ============================================================================
# Entry Fixtures
# ============================================================================

@pytest.fixture
def base_time():
    """Noon on an ordinary day, naive like most stored timestamps"""
    return datetime(2024, 3, 4, 12, 0, 0)


@pytest.fixture
def make_entry():
    """Factory for journal entries with sequential ids"""
    ids = count(1)

    def _make_entry(created_at, content="Today was a good day", **kwargs):
        return Entry(
            id=kwargs.pop("id", next(ids)),
            user_id=kwargs.pop("user_id", 1),
            title=kwargs.pop("title", "Entry"),
            content=content,
            mood=kwargs.pop("mood", Mood.NEUTRAL),
            category=kwargs.pop("category", "general"),
            created_at=created_at,
            **kwargs
        )

    return _make_entry


@pytest.fixture
def entries_on_days(make_entry, base_time):
    """Factory: one entry per day offset from base_time"""
    def _entries_on_days(*day_offsets, content="Today was a good day"):
        return [make_entry(base_time + timedelta(days=offset), content=content) for offset in day_offsets]

    return _entries_on_days


@pytest.fixture
def entry_at_hour(make_entry, base_time):
    """Factory: one entry at the given hour of base_time's day"""
    def _entry_at_hour(hour):
        return make_entry(base_time.replace(hour=hour, minute=30))

    return _entry_at_hour


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def test_api_key():
    """Standard test API key"""
    return "test_api_key_12345"


@pytest.fixture
def auth_headers(test_api_key, monkeypatch):
    """Authorization headers with API_KEYS configured"""
    monkeypatch.setattr(config, "API_KEYS", [test_api_key, "other_key"])
    return {"Authorization": f"Bearer {test_api_key}"}
