"""Application dispatch – PriorityRegistry."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from mp_hermes.kernel.errors import RegistryFrozenError, UnknownPriorityError

PRIORITY_LOW = 50
PRIORITY_MEDIUM = 100
PRIORITY_HIGH = 200
DEFAULT_PRIORITY = PRIORITY_MEDIUM


class PriorityRegistry:
    """Map integer priorities to backing-store queue keys.

    Registering an existing priority again replaces its key. Iteration yields
    ``(priority, key)`` pairs from the highest priority down, which is the
    order the dispatch loop scans queues in. A continuously full
    high-priority queue therefore starves lower ones.

    The registry is built during setup; :meth:`freeze` locks it once a
    dispatch loop starts reading it.
    """

    def __init__(self) -> None:
        self._queues: dict[int, str] = {}
        self._frozen = False

    def register(self, priority: int, key: str) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register priority {priority}: the registry is in use by a dispatch loop"
            )
        self._queues[priority] = key

    def resolve(self, priority: int) -> str:
        try:
            return self._queues[priority]
        except KeyError:
            raise UnknownPriorityError(priority) from None

    def ordered(self, only: Iterable[int] | None = None) -> list[tuple[int, str]]:
        """Return ``(priority, key)`` pairs, descending, optionally filtered to *only*."""
        wanted = set(only or ()) or None
        return [
            (priority, self._queues[priority])
            for priority in sorted(self._queues, reverse=True)
            if wanted is None or priority in wanted
        ]

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, priority: object) -> bool:
        return priority in self._queues

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(self.ordered())

    def __len__(self) -> int:
        return len(self._queues)


__all__ = [
    "DEFAULT_PRIORITY",
    "PRIORITY_HIGH",
    "PRIORITY_LOW",
    "PRIORITY_MEDIUM",
    "PriorityRegistry",
]
