from __future__ import annotations

from whatsapp_cloud.core.transport import Transport


class Resource:
    """A group of Graph API calls sharing one transport."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
