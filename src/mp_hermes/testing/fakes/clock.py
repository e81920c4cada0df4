"""Testing fakes – FakeClock factory."""
from __future__ import annotations

from datetime import UTC, datetime

from mp_hermes.kernel.time import FrozenClock

FAKE_EPOCH = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def FakeClock(start: datetime | float | None = None) -> FrozenClock:
    """Return a ``FrozenClock`` at *start* (epoch seconds or datetime).

    Defaults to 2026-01-01 12:00 UTC so schedule scores stay readable in tests.
    """
    return FrozenClock(FAKE_EPOCH if start is None else start)


__all__ = ["FAKE_EPOCH", "FakeClock"]
