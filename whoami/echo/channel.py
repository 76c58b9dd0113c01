"""Per-connection echo loop over an accepted WebSocket.

A channel moves CONNECTING -> OPEN -> CLOSED. Frames are answered in arrival
order with the same payload and the same text/binary type. Any receive or
send failure closes the channel; nothing is retried.
"""

from __future__ import annotations

import logging
from enum import Enum

from starlette.websockets import WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)


class EchoChannelState(str, Enum):
    """Lifecycle states of an echo channel."""

    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


class EchoChannel:
    """Echo every frame received on one WebSocket connection."""

    def __init__(self, websocket: WebSocket):
        """Initialize the channel in the CONNECTING state.

        Args:
            websocket: Connection scope that has not been accepted yet.

        Raises:
            ValueError: Raised when websocket is None.
        """

        if websocket is None:
            raise ValueError("websocket must not be None")
        self._websocket = websocket
        self._state = EchoChannelState.CONNECTING
        self._frames_echoed = 0

    @property
    def state(self) -> EchoChannelState:
        """Return the current lifecycle state."""

        return self._state

    @property
    def frames_echoed(self) -> int:
        """Return how many frames were written back so far."""

        return self._frames_echoed

    async def echo_run(self) -> None:
        """Accept the connection and echo frames until it ends.

        Returns:
            None: Returns once the channel is CLOSED.

        Raises:
            RuntimeError: I/O failures close the channel instead of propagating.
        """

        try:
            await self._websocket.accept()
        except (RuntimeError, OSError) as error:
            logger.warning("echo upgrade failed: %s", error)
            self._state = EchoChannelState.CLOSED
            return

        self._state = EchoChannelState.OPEN
        try:
            while self._state is EchoChannelState.OPEN:
                await self._echo_next_frame()
        except (WebSocketDisconnect, RuntimeError, OSError) as error:
            logger.debug("echo channel closed: %r", error)
        finally:
            self._state = EchoChannelState.CLOSED

    async def _echo_next_frame(self) -> None:
        message = await self._websocket.receive()
        if message["type"] == "websocket.disconnect":
            self._state = EchoChannelState.CLOSED
            return

        binary_payload = message.get("bytes")
        if binary_payload is not None:
            logger.info("Received b:%s", echo_format_frame_bytes(binary_payload))
            await self._websocket.send_bytes(binary_payload)
        else:
            text_payload = message.get("text") or ""
            logger.info("Received b:%s", echo_format_frame_bytes(text_payload.encode("utf-8")))
            await self._websocket.send_text(text_payload)
        self._frames_echoed += 1


def echo_format_frame_bytes(payload: bytes) -> str:
    """Render frame bytes as comma-terminated decimal values (`104,105,`)."""

    return "".join(f"{byte}," for byte in payload)
