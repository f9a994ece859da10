"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; the domain layer needs none.
- Group tests by the behaviour under test, then by scenario.
- Keep tests small, fast, and deterministic.
"""
