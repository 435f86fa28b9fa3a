import datetime as dt
import os

import pytest

# Ensure predictable dev-like environment before importing the app
os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("PORT", "3061")  # test port
os.environ.setdefault("DEBUG", "0")
os.environ.setdefault("CACHE_TYPE", "SimpleCache")
os.environ.setdefault("CACHE_TIMEOUT_SECONDS", "5")
os.environ.setdefault("EVENTS_CACHE_TIMEOUT_SECONDS", "5")
os.environ.setdefault("EVENTS_POOL_SIZE", "50")

# Sunday 7 Jan 2024, 13:37 in a fixed UTC+10 zone
TZ = dt.timezone(dt.timedelta(hours=10))
FIXED_NOW = dt.datetime(2024, 1, 7, 13, 37, 12, 345000, tzinfo=TZ)


class CountingClock:
    """Fixed clock that records how often it was read."""

    def __init__(self, now: dt.datetime = FIXED_NOW) -> None:
        self.now = now
        self.calls = 0

    def __call__(self) -> dt.datetime:
        self.calls += 1
        return self.now


@pytest.fixture
def fixed_now() -> dt.datetime:
    return FIXED_NOW


@pytest.fixture
def clock() -> CountingClock:
    return CountingClock()


@pytest.fixture
def make_client(clock):
    """Build an isolated server (own cache) around the fixed clock."""
    from mockdash.config import Settings
    from mockdash.server import ServerFactory

    def _make(**overrides):
        settings = Settings(**overrides)
        return ServerFactory(settings, clock=clock).build().test_client()

    return _make


@pytest.fixture
def api_client(make_client):
    return make_client()


@pytest.fixture(scope="session")
def flask_client():
    """Test client for the module-level server assembled on import."""
    # Import delayed so config reads env just set above
    from mockdash import server  # noqa: WPS433 (import inside function)
    return server.test_client()
