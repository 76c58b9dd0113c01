"""Deterministic synthetic payload generation and request parsing.

Byte `i` of a payload of length `n` is `PAYLOAD_CHARSET[i % 27]`, except the
first and last byte which carry `PAYLOAD_SENTINEL` so a consumer can see the
exact edges of the window. Content depends on the length only.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from .models import PayloadSpec, PayloadUnit

PAYLOAD_CHARSET = b"-ABCDEFGHIJKLMNOPQRSTUVWXYZ"
PAYLOAD_SENTINEL = b"|"
PAYLOAD_CHUNK_SIZE = 64 * 1024

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_SIGNED_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")
_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_BYTE_RANGE_PATTERN = re.compile(r"\s*([0-9]*)\s*-\s*([0-9]*)\s*")


class PayloadRangeError(ValueError):
    """Raised when a requested byte range cannot be satisfied."""


def domain_parse_payload_spec(size: str | None, unit: str | None, attachment: str | None) -> PayloadSpec:
    """Build a payload spec from raw query parameter values.

    Args:
        size: Raw `size` value. Non-integers fall back to 1, negatives clamp to 0.
        unit: Raw `unit` value (`kb`, `mb`, `gb`, `tb`, any case). Others mean bytes.
        attachment: Raw `attachment` flag. Unparseable values mean false.

    Returns:
        PayloadSpec: Normalized payload request.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    parsed_size = _domain_parse_int64(size)
    if parsed_size is None:
        parsed_size = 1
    if parsed_size < 0:
        parsed_size = 0

    try:
        parsed_unit = PayloadUnit((unit or "").lower())
    except ValueError:
        parsed_unit = PayloadUnit.BYTE

    return PayloadSpec(
        size=parsed_size,
        unit=parsed_unit,
        as_attachment=(attachment or "") in _TRUE_LITERALS,
    )


def domain_generate_payload(length: int) -> bytes:
    """Return the full synthetic payload of exactly `length` bytes.

    Args:
        length: Requested byte count. Values below zero produce an empty payload.

    Returns:
        bytes: Deterministic payload content.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    length = max(length, 0)
    return domain_render_payload_window(length, 0, length)


def domain_render_payload_window(length: int, start: int, stop: int) -> bytes:
    """Return bytes `[start, stop)` of the payload of the given total length.

    Args:
        length: Total payload length the window belongs to.
        start: Inclusive window start offset.
        stop: Exclusive window end offset.

    Returns:
        bytes: Window content, identical to slicing the full payload.

    Raises:
        ValueError: Raised when the window lies outside the payload.
    """

    if not 0 <= start <= stop <= length:
        raise ValueError(f"window [{start}, {stop}) is outside payload of length {length}")

    window_length = stop - start
    if window_length == 0:
        return b""

    offset = start % len(PAYLOAD_CHARSET)
    repeats = (offset + window_length) // len(PAYLOAD_CHARSET) + 1
    window = bytearray((PAYLOAD_CHARSET * repeats)[offset : offset + window_length])
    if start == 0:
        window[0] = PAYLOAD_SENTINEL[0]
    if stop == length:
        window[-1] = PAYLOAD_SENTINEL[0]
    return bytes(window)


def domain_iter_payload_chunks(
    length: int,
    start: int = 0,
    stop: int | None = None,
    chunk_size: int = PAYLOAD_CHUNK_SIZE,
) -> Iterator[bytes]:
    """Yield a payload window lazily in bounded chunks.

    Args:
        length: Total payload length.
        start: Inclusive window start offset.
        stop: Exclusive window end offset, defaults to `length`.
        chunk_size: Maximum bytes per yielded chunk.

    Returns:
        Iterator[bytes]: Consecutive chunks whose concatenation equals the window.

    Raises:
        ValueError: Raised when the window or chunk size is invalid.
    """

    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    window_stop = length if stop is None else stop
    for chunk_start in range(start, window_stop, chunk_size):
        yield domain_render_payload_window(length, chunk_start, min(chunk_start + chunk_size, window_stop))


def domain_parse_byte_range(header: str | None, length: int) -> tuple[int, int] | None:
    """Resolve a single-range `Range` header against a payload length.

    Args:
        header: Raw `Range` header value.
        length: Total payload length.

    Returns:
        tuple[int, int] | None: Half-open `(start, stop)` window, or None when the
        whole payload should be served (no header, other units, multiple ranges).

    Raises:
        PayloadRangeError: Raised when the range is malformed or unsatisfiable.
    """

    if not header:
        return None
    unit, _, ranges = header.partition("=")
    if unit.strip().lower() != "bytes":
        return None
    if "," in ranges:
        return None

    match = _BYTE_RANGE_PATTERN.fullmatch(ranges)
    if match is None:
        raise PayloadRangeError(f"invalid range: {header}")
    first, last = match.group(1), match.group(2)

    if not first:
        if not last:
            raise PayloadRangeError(f"invalid range: {header}")
        suffix_length = int(last)
        if suffix_length == 0 or length == 0:
            raise PayloadRangeError("invalid range: failed to overlap")
        return max(length - suffix_length, 0), length

    range_start = int(first)
    if range_start >= length:
        raise PayloadRangeError("invalid range: failed to overlap")
    if not last:
        return range_start, length
    range_end = int(last)
    if range_end < range_start:
        raise PayloadRangeError(f"invalid range: {header}")
    return range_start, min(range_end + 1, length)


def _domain_parse_int64(value: str | None) -> int | None:
    if value is None or _SIGNED_DECIMAL_PATTERN.fullmatch(value) is None:
        return None
    parsed_value = int(value)
    if not _INT64_MIN <= parsed_value <= _INT64_MAX:
        return None
    return parsed_value
