"""Adapters – concrete backing stores for the kernel ports."""
