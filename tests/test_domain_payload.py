"""Regression tests for synthetic payload generation and request parsing."""

import pytest

from whoami.domain import (
    PAYLOAD_CHARSET,
    PayloadRangeError,
    PayloadSpec,
    PayloadUnit,
    domain_generate_payload,
    domain_iter_payload_chunks,
    domain_parse_byte_range,
    domain_parse_payload_spec,
    domain_render_payload_window,
)


def test_domain_generate_payload_frames_cyclic_charset_with_sentinels() -> None:
    """Fill interior bytes cyclically and mark both edges with `|`.

    Returns:
        None: Assertions validate payload layout.

    Raises:
        AssertionError: Raised when the layout is wrong.
    """

    for length in (1, 2, 3, 27, 28, 100, 1000):
        payload = domain_generate_payload(length)

        assert len(payload) == length
        assert payload[0:1] == b"|"
        assert payload[-1:] == b"|"
        for index in range(1, length - 1):
            assert payload[index] == PAYLOAD_CHARSET[index % 27]


def test_domain_generate_payload_handles_empty_and_negative_lengths() -> None:
    """Return no bytes for zero or negative lengths.

    Returns:
        None: Assertions validate boundary handling.

    Raises:
        AssertionError: Raised when content is produced.
    """

    assert domain_generate_payload(0) == b""
    assert domain_generate_payload(-3) == b""


def test_domain_generate_payload_is_deterministic() -> None:
    """Produce byte-identical content for identical lengths.

    Returns:
        None: Assertions validate determinism.

    Raises:
        AssertionError: Raised when repeated calls differ.
    """

    assert domain_generate_payload(4096) == domain_generate_payload(4096)
    assert domain_generate_payload(30) == b"|ABCDEFGHIJKLMNOPQRSTUVWXYZ-A|"


def test_domain_render_payload_window_matches_full_payload_slices() -> None:
    """Render windows identical to slices of the full payload.

    Returns:
        None: Assertions validate window rendering.

    Raises:
        AssertionError: Raised when a window differs from the slice.
    """

    full_payload = domain_generate_payload(200)

    for start, stop in ((0, 10), (5, 60), (27, 54), (150, 200), (199, 200), (40, 40)):
        assert domain_render_payload_window(200, start, stop) == full_payload[start:stop]

    with pytest.raises(ValueError):
        domain_render_payload_window(200, 150, 201)


def test_domain_iter_payload_chunks_concatenates_to_window() -> None:
    """Yield bounded chunks that join back into the requested window.

    Returns:
        None: Assertions validate chunking.

    Raises:
        AssertionError: Raised when chunks are wrong.
    """

    chunks = list(domain_iter_payload_chunks(1000, chunk_size=64))

    assert all(len(chunk) <= 64 for chunk in chunks)
    assert b"".join(chunks) == domain_generate_payload(1000)
    assert b"".join(domain_iter_payload_chunks(1000, 100, 350, chunk_size=33)) == domain_generate_payload(1000)[100:350]
    assert list(domain_iter_payload_chunks(0)) == []


def test_domain_parse_payload_spec_applies_defaults_and_clamping() -> None:
    """Normalize raw query values into a payload spec.

    Returns:
        None: Assertions validate parsing rules.

    Raises:
        AssertionError: Raised when parsing deviates.
    """

    assert domain_parse_payload_spec(None, None, None) == PayloadSpec(size=1)
    assert domain_parse_payload_spec("abc", None, None).size == 1
    assert domain_parse_payload_spec(" 5", None, None).size == 1
    assert domain_parse_payload_spec("1_000", None, None).size == 1
    assert domain_parse_payload_spec("99999999999999999999", None, None).size == 1
    assert domain_parse_payload_spec("+7", None, None).size == 7
    assert domain_parse_payload_spec("-5", "kb", None).byte_length == 0
    assert domain_parse_payload_spec("3", "Mb", None) == PayloadSpec(size=3, unit=PayloadUnit.MB)
    assert domain_parse_payload_spec("3", "pb", None).unit is PayloadUnit.BYTE
    assert domain_parse_payload_spec("1", "tb", None).byte_length == 1024**4
    assert domain_parse_payload_spec("1", None, "T").as_attachment is True
    assert domain_parse_payload_spec("1", None, "yes").as_attachment is False


def test_domain_parse_byte_range_resolves_single_ranges() -> None:
    """Resolve supported range forms into half-open windows.

    Returns:
        None: Assertions validate range parsing.

    Raises:
        AssertionError: Raised when a range resolves incorrectly.
    """

    assert domain_parse_byte_range(None, 100) is None
    assert domain_parse_byte_range("items=0-1", 100) is None
    assert domain_parse_byte_range("bytes=0-1,5-6", 100) is None
    assert domain_parse_byte_range("bytes=0-9", 100) == (0, 10)
    assert domain_parse_byte_range("bytes=90-", 100) == (90, 100)
    assert domain_parse_byte_range("bytes=-10", 100) == (90, 100)
    assert domain_parse_byte_range("bytes=-500", 100) == (0, 100)
    assert domain_parse_byte_range("bytes=50-500", 100) == (50, 100)


def test_domain_parse_byte_range_rejects_unsatisfiable_ranges() -> None:
    """Raise for malformed or non-overlapping ranges.

    Returns:
        None: Assertions validate range rejection.

    Raises:
        AssertionError: Raised when an invalid range is accepted.
    """

    for header in ("bytes=100-", "bytes=9-3", "bytes=-0", "bytes=-", "bytes=a-b"):
        with pytest.raises(PayloadRangeError):
            domain_parse_byte_range(header, 100)
