"""Kernel store – backing store port."""
from mp_hermes.kernel.store.port import BackingStore

__all__ = ["BackingStore"]
