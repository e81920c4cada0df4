"""Testing helpers – in-memory fakes for kernel ports."""
