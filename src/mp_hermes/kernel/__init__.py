"""Kernel – errors, time, messaging and store ports shared by every layer."""
