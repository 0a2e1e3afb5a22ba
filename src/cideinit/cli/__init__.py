"""cideinit command-line interface."""
