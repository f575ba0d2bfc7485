"""Test suite for utilbox.

Test structure:
- unit/: Unit tests - pure functions and value objects in isolation

Tests run against the "testing" environment (JSON log rendering).
"""
