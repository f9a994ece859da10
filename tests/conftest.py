"""Global pytest fixtures for remodel."""

pytest_plugins = [
    "tests.fixtures.projects",
]
