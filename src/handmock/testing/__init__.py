"""
Test-runner integrations.

The pytest plugin is loaded automatically through its ``pytest11`` entry point;
``MockTestCase`` serves ``unittest`` suites.
"""

from __future__ import annotations

from handmock.testing.unittest_support import MockTestCase

__all__ = ["MockTestCase"]
