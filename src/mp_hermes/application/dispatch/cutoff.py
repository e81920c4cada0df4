"""Application dispatch – MaxItemsCutoff."""
from __future__ import annotations


class MaxItemsCutoff:
    """Count deliveries in one ``wait`` call and stop at ``max_items``.

    ``max_items == 0`` means unbounded. Used to recycle worker processes
    after a fixed amount of work.
    """

    def __init__(self, max_items: int = 0) -> None:
        self._max_items = 0
        self._processed = 0
        self.max_items = max_items

    @property
    def max_items(self) -> int:
        return self._max_items

    @max_items.setter
    def max_items(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"max_items must be >= 0, got {value}")
        self._max_items = value

    @property
    def processed(self) -> int:
        return self._processed

    def reset(self) -> None:
        self._processed = 0

    def increment(self) -> None:
        self._processed += 1

    def should_process_next(self) -> bool:
        return self._max_items == 0 or self._processed < self._max_items


__all__ = ["MaxItemsCutoff"]
