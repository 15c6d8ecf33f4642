from datetime import UTC, datetime, timedelta

import pytest

from smartlink.adapters.memory_storage import InMemoryKeyValueStore
from smartlink.app_shell.context import ServiceContext
from smartlink.rules.models import Rules


class FixedClock:
    """Clock pinned to a known instant; advance() moves it forward."""

    def __init__(self, now: datetime | None = None) -> None:
        self._now = now or datetime(2025, 3, 14, 9, 30, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, **kwargs: float) -> None:
        self._now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def rules() -> Rules:
    return Rules()


@pytest.fixture
def test_ctx(storage, rules, clock) -> ServiceContext:
    """
    Creates a full ServiceContext backed by an in-memory store and fixed clock.
    """
    return ServiceContext.create(storage, rules=rules, clock=clock)
