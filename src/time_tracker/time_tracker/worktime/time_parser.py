"""Single normalization boundary for time-of-day values.

Stored shifts come in several shapes: ``"9:00"``/``"09:00"`` strings from the
timesheet form, ISO datetimes (``2025-04-15T09:00:00.000Z``) from older
records, and whole shift objects that an upstream layer serialized to JSON
(sometimes twice) where a single time was expected. Everything that needs an
``HH:MM`` value goes through :func:`normalize_time`; nothing else should look
at the raw shape of a time value.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, time
from typing import Any, Mapping, Optional

from ..core.constants import TIME_ENTRY_KEYS

logger = logging.getLogger(__name__)

_HH_MM_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?$")
_ISO_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[T ](\d{2}):(\d{2})")

# Guards against pathological nesting of JSON-in-JSON payloads.
_MAX_DEPTH = 3


def _format(hours: int, minutes: int) -> Optional[str]:
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None
    return f"{hours:02d}:{minutes:02d}"


def _from_mapping(value: Mapping[str, Any], depth: int) -> Optional[str]:
    for key in TIME_ENTRY_KEYS:
        if value.get(key) is not None:
            return _normalize(value[key], depth + 1)
    return None


def _from_string(value: str, depth: int) -> Optional[str]:
    text = value.strip()
    if not text:
        return None

    if text[0] in "{\"":
        try:
            decoded = json.loads(text)
        except ValueError:
            return None
        return _normalize(decoded, depth + 1)

    m = _HH_MM_RE.match(text)
    if m:
        return _format(int(m.group(1)), int(m.group(2)))

    m = _ISO_DATETIME_RE.match(text)
    if m:
        return _format(int(m.group(1)), int(m.group(2)))

    return None


def _normalize(value: Any, depth: int) -> Optional[str]:
    if value is None or depth > _MAX_DEPTH:
        return None
    if isinstance(value, (datetime, time)):
        return _format(value.hour, value.minute)
    if isinstance(value, str):
        return _from_string(value, depth)
    if isinstance(value, Mapping):
        return _from_mapping(value, depth)
    return None


def normalize_time(value: Any) -> Optional[str]:
    """Return ``value`` as a zero-padded ``HH:MM`` string, or None if unknown.

    None means "time unknown" and must never be read as midnight. Malformed
    input is not an error here: it is logged at debug level and dropped.
    """
    result = _normalize(value, 0)
    if result is None and value not in (None, ""):
        logger.debug("Unrecognized time value %r", value)
    return result


def to_minutes(value: str) -> int:
    """Minutes since midnight for an already normalized ``HH:MM`` value."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)
