"""Defensive readers for untrusted health-check entries.

Entries usually come straight from a decoded JSON health endpoint. Nothing
here raises on malformed data: each reader falls back to a conservative
value and logs what it saw.
"""

from __future__ import annotations

import logging

from healthgrade.constants.severity import HEALTHY_DETAIL, HEALTHY_TRUE_TEXT, SEVERITY_DETAIL
from healthgrade.model.severity import Severity
from healthgrade.types import CheckEntry

logger = logging.getLogger(__name__)


def parse_healthy(entry: CheckEntry) -> bool:
    """Read the ``healthy`` flag, defaulting to ``False``.

    Booleans are used as is and anything else is compared, case-insensitively,
    against ``"true"`` in its text form. A value that cannot be converted to
    text counts as unhealthy.
    """
    value = entry.get(HEALTHY_DETAIL, False)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == HEALTHY_TRUE_TEXT
    if value is None:
        return False
    try:
        text = str(value)
    except Exception:
        logger.warning(
            "Check entry has a 'healthy' value of type %s that failed to convert to text; treating it as unhealthy",
            type(value).__name__,
        )
        return False
    return text.lower() == HEALTHY_TRUE_TEXT


def parse_severity(entry: CheckEntry) -> Severity | None:
    """Read the ``severity`` field.

    Returns ``None`` when the field is absent or is not a string (the
    severity is then unspecified), and ``Severity.WARN`` when it is a string
    naming no known level.
    """
    if SEVERITY_DETAIL not in entry:
        return None

    value = entry[SEVERITY_DETAIL]
    if isinstance(value, Severity):
        return value
    if not isinstance(value, str):
        logger.warning(
            "Check entry has a severity of type %s instead of a string; treating it as unspecified",
            type(value).__name__,
        )
        return None

    severity = Severity.parse(value)
    if severity is None:
        logger.error("Check entry has an invalid severity %r; using WARN", value)
        return Severity.WARN
    return severity
