"""remodel test suite."""
