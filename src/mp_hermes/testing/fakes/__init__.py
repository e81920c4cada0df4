"""Testing fakes – in-memory doubles for kernel ports."""
from mp_hermes.kernel.time import FrozenClock
from mp_hermes.testing.fakes.clock import FakeClock
from mp_hermes.testing.fakes.store import InMemoryStore

__all__ = ["FakeClock", "FrozenClock", "InMemoryStore"]
