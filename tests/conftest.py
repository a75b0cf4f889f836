"""
Pytest configuration and fixtures for MoodBot tests.
"""
from __future__ import annotations

import os
from datetime import date
from typing import Callable, Generator

import arrow
import pytest

# Storage must resolve to the in-memory handler before the app is imported.
os.environ.pop("MONGODB_URI", None)
os.environ.setdefault("DEVELOPMENT", "True")

from fastapi.testclient import TestClient  # noqa: E402

from moodbot.app import app  # noqa: E402
from moodbot.models import MoodRecord  # noqa: E402
from moodbot.routes.utils import (  # noqa: E402
    MemoryDataHandler,
    get_data_handler,
    get_responder,
)
from moodbot.utils import DEFAULT_CATALOG, ContextualResponder, MoodCatalog  # noqa: E402

TODAY = date(2024, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def catalog() -> MoodCatalog:
    return DEFAULT_CATALOG


@pytest.fixture
def make_record() -> Callable[..., MoodRecord]:
    """Build a record ``days_ago`` days before :data:`TODAY` at ``time``."""

    def _make(mood: str, *, days_ago: int = 0, time: str = "12:00", user_id: str = "user-1", note: str = "") -> MoodRecord:
        hour, minute = (int(part) for part in time.split(":"))
        at = arrow.get(TODAY).shift(days=-days_ago).replace(hour=hour, minute=minute)
        return MoodRecord.create(user_id, mood, note, at=at)

    return _make


@pytest.fixture
def first_choice_responder() -> ContextualResponder:
    return ContextualResponder(choose=lambda options: options[0])


@pytest.fixture
def memory_data_handler() -> MemoryDataHandler:
    return MemoryDataHandler()


@pytest.fixture
def client(memory_data_handler, first_choice_responder) -> Generator[TestClient, None, None]:
    """Test client backed by a fresh in-memory store and a deterministic responder."""
    app.dependency_overrides[get_data_handler] = lambda: memory_data_handler
    app.dependency_overrides[get_responder] = lambda: first_choice_responder

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()
