from __future__ import annotations

import logging

from whatsapp_cloud.core.config import Settings, settings as default_settings
from whatsapp_cloud.core.transport import GraphTransport, Transport
from whatsapp_cloud.resources.business_profile import BusinessProfileResource
from whatsapp_cloud.resources.messages import MessagesResource
from whatsapp_cloud.resources.phone_numbers import PhoneNumbersResource


class WhatsApp:
    """Entry point bundling every resource over one shared transport.

    Usage::

        async with WhatsApp() as wa:
            await wa.messages.create_message(phone_id, TextMessage(...))
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.settings = settings or default_settings
        if self.settings.log_level:
            logging.getLogger("whatsapp_cloud").setLevel(self.settings.log_level.upper())

        self._owns_transport = transport is None
        self.transport: Transport = transport or GraphTransport(self.settings)

        self.business_profile = BusinessProfileResource(self.transport)
        self.phone_numbers = PhoneNumbersResource(self.transport)
        self.messages = MessagesResource(self.transport)

    async def __aenter__(self) -> WhatsApp:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self.transport, GraphTransport):
            await self.transport.close()
