"""Unit tests for PriorityRegistry."""
from __future__ import annotations

import pytest

from mp_hermes.application.dispatch import (
    DEFAULT_PRIORITY,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    PriorityRegistry,
)
from mp_hermes.kernel.errors import RegistryFrozenError, UnknownPriorityError


class TestPriorityConstants:
    def test_ordering(self) -> None:
        assert PRIORITY_LOW < PRIORITY_MEDIUM < PRIORITY_HIGH

    def test_default_is_medium(self) -> None:
        assert DEFAULT_PRIORITY == PRIORITY_MEDIUM


class TestPriorityRegistry:
    def test_resolve_registered(self) -> None:
        reg = PriorityRegistry()
        reg.register(10, "high")
        assert reg.resolve(10) == "high"

    def test_resolve_unknown_raises(self) -> None:
        reg = PriorityRegistry()
        with pytest.raises(UnknownPriorityError) as exc_info:
            reg.resolve(3)
        assert exc_info.value.priority == 3

    def test_register_overwrites(self) -> None:
        reg = PriorityRegistry()
        reg.register(10, "old")
        reg.register(10, "new")
        assert reg.resolve(10) == "new"
        assert len(reg) == 1

    def test_key_is_not_validated(self) -> None:
        reg = PriorityRegistry()
        reg.register(1, "")
        assert reg.resolve(1) == ""

    def test_ordered_descending(self) -> None:
        reg = PriorityRegistry()
        reg.register(1, "low")
        reg.register(200, "high")
        reg.register(100, "medium")
        assert reg.ordered() == [(200, "high"), (100, "medium"), (1, "low")]
        assert list(reg) == reg.ordered()

    def test_ordered_filter(self) -> None:
        reg = PriorityRegistry()
        for priority, key in [(1, "a"), (2, "b"), (3, "c")]:
            reg.register(priority, key)
        assert reg.ordered([1, 3, 99]) == [(3, "c"), (1, "a")]

    def test_empty_filter_means_all(self) -> None:
        reg = PriorityRegistry()
        reg.register(1, "a")
        reg.register(2, "b")
        assert reg.ordered([]) == reg.ordered(None) == [(2, "b"), (1, "a")]

    def test_empty_generator_filter_means_all(self) -> None:
        reg = PriorityRegistry()
        reg.register(1, "a")
        reg.register(2, "b")
        assert reg.ordered(p for p in ()) == [(2, "b"), (1, "a")]

    def test_generator_filter(self) -> None:
        reg = PriorityRegistry()
        for priority, key in [(1, "a"), (2, "b"), (3, "c")]:
            reg.register(priority, key)
        assert reg.ordered(p for p in (2, 3)) == [(3, "c"), (2, "b")]

    def test_contains(self) -> None:
        reg = PriorityRegistry()
        reg.register(5, "q")
        assert 5 in reg
        assert 6 not in reg

    def test_freeze_blocks_registration(self) -> None:
        reg = PriorityRegistry()
        reg.register(5, "q")
        reg.freeze()
        assert reg.frozen
        with pytest.raises(RegistryFrozenError):
            reg.register(6, "other")
        assert reg.resolve(5) == "q"
