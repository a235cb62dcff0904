"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire
import pytest

# Keep spans local: no console noise, nothing sent to Logfire
logfire.configure(send_to_logfire=False, console=False)


class FakeClock:
    """Settable clock for expiry tests."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """Clock fixed at 2026-01-01 12:00 UTC until advanced."""
    return FakeClock()
