"""Shared pytest fixtures for handmock tests."""

from __future__ import annotations

import pytest

from handmock import CollectingReporter
from tests.doubles import MockCat, MockDependency, MockExample


@pytest.fixture
def mock() -> MockExample:
    """Return a fresh mock of the example protocol."""
    return MockExample()


@pytest.fixture
def dependency() -> MockDependency:
    return MockDependency()


@pytest.fixture
def cat() -> MockCat:
    return MockCat()


@pytest.fixture
def reporter() -> CollectingReporter:
    """Return a reporter that records failures instead of failing the test."""
    return CollectingReporter()
