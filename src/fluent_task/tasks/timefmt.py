# src/fluent_task/tasks/timefmt.py

"""
Conversion between instants and local-time text.

An instant is a POSIX timestamp (float seconds since the epoch). Text is
always DD/MM/YYYY HH:MM:SS in the process's local timezone.
"""

from __future__ import annotations

import logging
import re
import time

from ..errors import ParseError

logger = logging.getLogger(__name__)

TIME_FORMAT = "%d/%m/%Y %H:%M:%S"

_TIMESTAMP_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def format_instant(instant: float) -> str:
    """Render an instant as local DD/MM/YYYY HH:MM:SS (fractional seconds dropped)."""
    return time.strftime(TIME_FORMAT, time.localtime(instant))


def parse_instant(text: str) -> float:
    """
    Parse local DD/MM/YYYY HH:MM:SS into an instant.

    Raises ParseError for anything else, including impossible dates
    ("31/02/2020 ..."), leap seconds and wall times skipped by a DST change.
    """
    if not isinstance(text, str):
        logger.debug("Rejected non-string timestamp %r", text)
        raise ParseError(repr(text), "not a string")

    raw = text.strip()
    if not _TIMESTAMP_RE.fullmatch(raw):
        logger.debug("Rejected timestamp text %r", text)
        raise ParseError(text)

    try:
        parsed = time.strptime(raw, TIME_FORMAT)
    except ValueError as e:
        logger.debug("strptime failed for %r: %s", text, e)
        raise ParseError(text, str(e)) from e

    if parsed.tm_sec > 59:
        logger.debug("Rejected leap second in %r", text)
        raise ParseError(text, "seconds out of range")

    # strptime leaves tm_isdst=-1, so mktime decides DST from the local zone.
    try:
        instant = float(time.mktime(parsed))
    except (OverflowError, ValueError) as e:
        logger.debug("mktime failed for %r: %s", text, e)
        raise ParseError(text, "not representable as a local time") from e

    # Wall times inside a DST gap do not exist; mktime shifts them.
    if time.localtime(instant)[:6] != parsed[:6]:
        logger.debug("Rejected nonexistent local time %r", text)
        raise ParseError(text, "nonexistent local time")

    return instant
