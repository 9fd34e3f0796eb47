"""
Reporter configuration for test-runner integrations.

The HANDMOCK_REPORTER environment variable chooses how the pytest plugin
turns mock assertion failures into test outcomes.

Environment values:
    - deferred (default): failures are collected while the test runs and the
      test is failed once its body finishes, so later assertions still run
    - immediate: the first failure raises ``MockAssertionError``

Usage:
    from handmock.environment import get_reporter_mode

    mode = get_reporter_mode()  # ReporterMode.DEFERRED or ReporterMode.IMMEDIATE

    # An explicit setting (pytest ini option or marker) wins over the environment
    mode = get_reporter_mode(config.getini("handmock_reporter"))
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum

logger = logging.getLogger(__name__)


class ReporterMode(StrEnum):
    """How failures are delivered to the test runner."""

    DEFERRED = "deferred"
    IMMEDIATE = "immediate"


# Default mode
_DEFAULT_MODE = ReporterMode.DEFERRED

# Environment variable name
HANDMOCK_REPORTER_VAR = "HANDMOCK_REPORTER"

_ALIASES: dict[str, ReporterMode] = {
    "deferred": ReporterMode.DEFERRED,
    "defer": ReporterMode.DEFERRED,
    "soft": ReporterMode.DEFERRED,
    "immediate": ReporterMode.IMMEDIATE,
    "raise": ReporterMode.IMMEDIATE,
    "strict": ReporterMode.IMMEDIATE,
}


def parse_reporter_mode(
    value: str | None, *, source: str = HANDMOCK_REPORTER_VAR
) -> ReporterMode | None:
    """Parse a mode string.

    Returns:
        The mode, or None when the value is empty or unknown. Unknown values
        log a warning so the next setting in the resolution order applies.
    """
    normalized = (value or "").lower().strip()
    if not normalized:
        return None
    mode = _ALIASES.get(normalized)
    if mode is None:
        logger.warning(
            "Unknown %s value '%s'. Valid values: deferred, immediate. Ignoring it.",
            source,
            normalized,
        )
    return mode


def get_reporter_mode(override: str | ReporterMode | None = None) -> ReporterMode:
    """Determine the reporter mode.

    Resolution order:
    1. ``override`` if set (pytest ini option or marker)
    2. The HANDMOCK_REPORTER environment variable
    3. deferred

    Empty and unknown values at a step are skipped.

    Examples:
        >>> import os
        >>> os.environ["HANDMOCK_REPORTER"] = "raise"
        >>> get_reporter_mode()
        <ReporterMode.IMMEDIATE: 'immediate'>
        >>> get_reporter_mode("deferred")
        <ReporterMode.DEFERRED: 'deferred'>
    """
    if isinstance(override, ReporterMode):
        return override
    mode = parse_reporter_mode(override, source="handmock_reporter")
    if mode is not None:
        return mode
    mode = parse_reporter_mode(os.environ.get(HANDMOCK_REPORTER_VAR))
    return mode if mode is not None else _DEFAULT_MODE


def is_deferred(override: str | ReporterMode | None = None) -> bool:
    """Check if failures should be collected until the test finishes."""
    return get_reporter_mode(override) == ReporterMode.DEFERRED
