"""Pytest configuration for integration tests."""

import os

import pytest


def pytest_collection_modifyitems(items):
    """Mark live tests as integration and skip them without an API key."""
    skip_live = pytest.mark.skip(reason="OPENAI_API_KEY not set")
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
            if not os.environ.get("OPENAI_API_KEY"):
                item.add_marker(skip_live)
