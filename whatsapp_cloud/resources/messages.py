from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_cloud.core.transport import RequestOptions, encode_path_segment
from whatsapp_cloud.resources.base import Resource
from whatsapp_cloud.schemas.common import MESSAGING_PRODUCT, MessageID, PhoneNumberID
from whatsapp_cloud.schemas.message import (
    CreateMessageBase,
    CreateMessagePayload,
    MarkAsReadPayload,
    create_message_options_adapter,
)


class MessagesResource(Resource):
    """Send messages from a business phone number."""

    def get_endpoint(self, phone_number_id: PhoneNumberID) -> str:
        return f"{encode_path_segment(phone_number_id)}/messages"

    async def create_message(
        self,
        phone_number_id: PhoneNumberID,
        options: CreateMessageBase | Mapping[str, Any],
        request: RequestOptions | None = None,
    ) -> CreateMessagePayload:
        """Send one message.

        Args:
            phone_number_id: Sending business phone number.
            options: A message variant such as ``TextMessage``, or a mapping
                carrying a ``type`` tag and the payload under the same key.
            request: Per-call httpx overrides.
        """
        if not isinstance(options, CreateMessageBase):
            options = create_message_options_adapter.validate_python(options)

        data = await self._transport.request(
            "POST",
            self.get_endpoint(phone_number_id),
            json=options.to_request_body(),
            request=request,
        )
        return CreateMessagePayload.model_validate(data)

    async def mark_as_read(
        self,
        phone_number_id: PhoneNumberID,
        message_id: MessageID,
        request: RequestOptions | None = None,
    ) -> MarkAsReadPayload:
        """Mark a received message (and everything before it) as read."""
        data = await self._transport.request(
            "POST",
            self.get_endpoint(phone_number_id),
            json={
                "messaging_product": MESSAGING_PRODUCT,
                "status": "read",
                "message_id": message_id,
            },
            request=request,
        )
        return MarkAsReadPayload.model_validate(data)
