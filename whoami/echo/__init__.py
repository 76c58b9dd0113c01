"""Duplex echo channel returning every received frame unchanged."""

from .channel import EchoChannel, EchoChannelState, echo_format_frame_bytes
from .handshake import WEBSOCKET_SUPPORTED_VERSION, echo_describe_upgrade_failure

__all__ = [
    "WEBSOCKET_SUPPORTED_VERSION",
    "EchoChannel",
    "EchoChannelState",
    "echo_describe_upgrade_failure",
    "echo_format_frame_bytes",
]
