"""Application layer – dispatch driver built on kernel ports."""
