"""Small transforms shared by the node mappers."""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)

RESERVED_FIELDS: tuple[str, ...] = ("id", "children", "parent", "internal")

_DASH_BOUNDARY = re.compile(r"([a-zA-Z])(?=[A-Z])")
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


def omit(data: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a shallow copy of ``data`` without ``keys``."""
    excluded = set(keys)
    return {key: value for key, value in data.items() if key not in excluded}


def strip_reserved(data: Mapping[str, Any]) -> dict[str, Any]:
    return omit(data, RESERVED_FIELDS)


def camel_case_to_dash(value: str) -> str:
    """Convert ``GuestTutorial`` style names to ``guest-tutorial``."""
    return _DASH_BOUNDARY.sub(r"\1-", value).lower()


def parse_timestamp(value: str) -> int | float:
    """Convert an ``[[H:]M:]S`` timestamp into a number of seconds.

    Segments are weighted by powers of 60 from the right, so a fourth
    segment counts days. A segment without a leading integer makes the
    total NaN instead of raising.
    """
    segments = value.split(":")
    total: int | float = 0
    for position, segment in enumerate(reversed(segments)):
        total += _parse_segment(segment) * 60**position
    if isinstance(total, float) and math.isnan(total):
        logger.warning("Timestamp '%s' is not numeric; seconds will be NaN.", value)
    return total


def _parse_segment(segment: str) -> int | float:
    match = _INTEGER_PREFIX.match(segment)
    if match is None:
        return math.nan
    return int(match.group(1))
