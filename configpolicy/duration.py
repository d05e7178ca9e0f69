"""Parsing of duration strings such as ``"1h30m"``, ``"1.5s"`` or ``"-250ms"``."""

from __future__ import annotations

import re
from datetime import timedelta

_NANOS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,  # micro sign
    "\u03bcs": 1_000,  # Greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_MAX_NANOS = 2**63 - 1
_COMPONENT = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)")


def parse_duration(text: str) -> timedelta:
    """Parse a signed sequence of decimal numbers with units into a timedelta.

    Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``.
    The bare string ``"0"`` is accepted without a unit. Precision below one
    microsecond is truncated. Raises ValueError on malformed input or when the
    value does not fit in a signed 64-bit count of nanoseconds.
    """
    invalid = f'time: invalid duration "{text}"'
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(invalid)

    limit = _MAX_NANOS + 1 if negative else _MAX_NANOS
    total = 0
    pos = 0
    while pos < len(rest):
        match = _COMPONENT.match(rest, pos)
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            raise ValueError(invalid)
        if not unit:
            raise ValueError(f'time: missing unit in duration "{text}"')
        scale = _NANOS_PER_UNIT.get(unit)
        if scale is None:
            raise ValueError(f'time: unknown unit "{unit}" in duration "{text}"')

        value = int(whole or "0") * scale
        if fraction:
            value += int(fraction) * scale // 10 ** len(fraction)
        total += value
        if total > limit:
            raise ValueError(invalid)
        pos = match.end()

    result = timedelta(microseconds=total // 1000)
    return -result if negative else result