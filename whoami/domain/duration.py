"""Parsing of Go-style duration strings such as `300ms` or `1h15m`."""

from __future__ import annotations

import math
import re

_DURATION_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_MAX_SECONDS = (2**63 - 1) / 1e9
_DURATION_COMPONENT_PATTERN = re.compile(r"([0-9]*(?:\.[0-9]*)?)([^0-9.]+)")


def domain_parse_duration(text: str | None) -> float | None:
    """Parse a signed sequence of decimal numbers with unit suffixes.

    Args:
        text: Raw duration string, for example `1.5h`, `2h45m`, `-300ms` or `0`.

    Returns:
        float | None: Duration in seconds, or None when the text is not a valid
        duration.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not text:
        return None

    sign = 1.0
    remainder = text
    if remainder[0] in "+-":
        sign = -1.0 if remainder[0] == "-" else 1.0
        remainder = remainder[1:]
    if remainder == "0":
        return 0.0
    if not remainder:
        return None

    total_seconds = 0.0
    position = 0
    while position < len(remainder):
        match = _DURATION_COMPONENT_PATTERN.match(remainder, position)
        if match is None:
            return None
        number, unit = match.group(1), match.group(2)
        if number in ("", "."):
            return None
        unit_seconds = _DURATION_UNIT_SECONDS.get(unit)
        if unit_seconds is None:
            return None
        total_seconds += float(number) * unit_seconds
        if not math.isfinite(total_seconds) or total_seconds > _DURATION_MAX_SECONDS:
            return None
        position = match.end()

    return sign * total_seconds
