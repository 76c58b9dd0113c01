"""Domain models and pure helpers shared across application layers."""

from .duration import domain_parse_duration
from .models import PayloadSpec, PayloadUnit
from .payload import (
    PAYLOAD_CHARSET,
    PAYLOAD_SENTINEL,
    PayloadRangeError,
    domain_generate_payload,
    domain_iter_payload_chunks,
    domain_parse_byte_range,
    domain_parse_payload_spec,
    domain_render_payload_window,
)

__all__ = [
    "PAYLOAD_CHARSET",
    "PAYLOAD_SENTINEL",
    "PayloadRangeError",
    "PayloadSpec",
    "PayloadUnit",
    "domain_generate_payload",
    "domain_iter_payload_chunks",
    "domain_parse_byte_range",
    "domain_parse_duration",
    "domain_parse_payload_spec",
    "domain_render_payload_window",
]
