from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from whatsapp_cloud.schemas.common import INBOUND_ONLY_MESSAGE_TYPES, MessageType
from whatsapp_cloud.schemas.webhook import (
    EventNotification,
    ImageEventMessage,
    TextEventMessage,
    UnknownEventMessage,
    event_message_adapter,
)

BASE = {"from": "16315551234", "id": "wamid.INBOUND", "timestamp": "1603059201"}

# One realistic inbound payload per tag Meta can deliver
INBOUND_PAYLOADS: dict[MessageType, Any] = {
    MessageType.AUDIO: {"id": "media-1", "mime_type": "audio/ogg; codecs=opus", "sha256": "abc", "voice": True},
    MessageType.BUTTON: {"payload": "STOP_PROMOTIONS", "text": "Stop promotions"},
    MessageType.CONTACTS: [
        {"name": {"formatted_name": "Ada Lovelace"}, "phones": [{"phone": "+447700900000", "wa_id": "447700900000"}]}
    ],
    MessageType.DOCUMENT: {"id": "media-2", "mime_type": "application/pdf", "sha256": "def", "filename": "a.pdf", "caption": "Invoice"},
    MessageType.IMAGE: {"id": "media-3", "mime_type": "image/jpeg", "sha256": "ghi", "caption": "Look"},
    MessageType.INTERACTIVE: {"type": "button_reply", "button_reply": {"id": "yes", "title": "Yes"}},
    MessageType.LOCATION: {"latitude": 51.5, "longitude": -0.12, "name": "Office", "address": "1 Main St"},
    MessageType.ORDER: {
        "catalog_id": "catalog-1",
        "text": "Please deliver",
        "product_items": [{"product_retailer_id": "sku-1", "quantity": 2, "item_price": 9.99, "currency": "USD"}],
    },
    MessageType.REACTION: {"message_id": "wamid.OUTBOUND", "emoji": "❤️"},
    MessageType.STICKER: {"id": "media-4", "mime_type": "image/webp", "sha256": "jkl", "animated": False},
    MessageType.SYSTEM: {"body": "NAME changed from 1 to 2", "type": "customer_changed_number", "new_wa_id": "2", "wa_id": "1"},
    MessageType.TEXT: {"body": "Hello"},
    MessageType.UNSUPPORTED: {"type": "edit"},
    MessageType.VIDEO: {"id": "media-5", "mime_type": "video/mp4", "sha256": "mno"},
}


def test_inbound_union_covers_every_delivered_tag() -> None:
    assert set(INBOUND_PAYLOADS) == set(MessageType) - {MessageType.TEMPLATE}
    assert INBOUND_ONLY_MESSAGE_TYPES <= set(INBOUND_PAYLOADS)


@pytest.mark.parametrize("message_type", sorted(INBOUND_PAYLOADS))
def test_event_message_round_trip(message_type: MessageType) -> None:
    raw = {**BASE, "type": message_type.value, message_type.value: INBOUND_PAYLOADS[message_type]}

    message = event_message_adapter.validate_python(raw)
    dumped = event_message_adapter.dump_python(message, mode="json", by_alias=True, exclude_none=True)
    again = event_message_adapter.validate_python(dumped)

    assert again.type == message_type
    assert dumped == raw
    assert again == message


def test_event_message_keeps_unknown_fields() -> None:
    raw = {**BASE, "type": "text", "text": {"body": "Hi", "future": 1}, "new_top_level": "x"}

    message = event_message_adapter.validate_python(raw)
    dumped = event_message_adapter.dump_python(message, mode="json", by_alias=True, exclude_none=True)

    assert dumped["text"]["future"] == 1
    assert dumped["new_top_level"] == "x"


def test_event_message_rejects_wrong_payload_key() -> None:
    with pytest.raises(ValidationError):
        event_message_adapter.validate_python({**BASE, "type": "image", "text": {"body": "Hi"}})


def test_reply_context_is_parsed() -> None:
    message = event_message_adapter.validate_python(
        {
            **BASE,
            "type": "text",
            "text": {"body": "Answer"},
            "context": {"from": "15550001111", "id": "wamid.QUESTION"},
        }
    )

    assert message.context is not None
    assert message.context.from_ == "15550001111"
    assert message.context.id == "wamid.QUESTION"


def test_notification_iterates_messages(text_webhook_payload: dict[str, Any]) -> None:
    notification = EventNotification.model_validate(text_webhook_payload)

    messages = list(notification.iter_messages())

    assert len(messages) == 1
    metadata, message = messages[0]
    assert metadata.phone_number_id == "PHONE_NUMBER_ID"
    assert isinstance(message, TextEventMessage)
    assert message.from_ == "16315551234"
    assert message.text.body == "Hello this is an answer"
    assert notification.entry[0].changes[0].value.contacts[0].profile.name == "Kerry Fisher"


def test_notification_parses_statuses() -> None:
    notification = EventNotification.model_validate(
        {
            "object": "whatsapp_business_account",
            "entry": [
                {
                    "id": "WABA_ID",
                    "changes": [
                        {
                            "field": "messages",
                            "value": {
                                "messaging_product": "whatsapp",
                                "metadata": {"display_phone_number": "15550001111", "phone_number_id": "PN"},
                                "statuses": [
                                    {
                                        "id": "wamid.SENT",
                                        "status": "delivered",
                                        "timestamp": "1603086313",
                                        "recipient_id": "16315551234",
                                        "biz_opaque_callback_data": "campaign-42",
                                        "conversation": {
                                            "id": "CONVERSATION_ID",
                                            "origin": {"type": "marketing"},
                                        },
                                        "pricing": {
                                            "billable": True,
                                            "pricing_model": "CBP",
                                            "category": "marketing",
                                        },
                                    },
                                    {
                                        "id": "wamid.FAILED",
                                        "status": "failed",
                                        "timestamp": "1603086314",
                                        "recipient_id": "16315551234",
                                        "errors": [{"code": 131026, "title": "Message undeliverable"}],
                                    },
                                ],
                            },
                        }
                    ],
                }
            ],
        }
    )

    statuses = [status for _, status in notification.iter_statuses()]

    assert [s.status for s in statuses] == ["delivered", "failed"]
    assert statuses[0].biz_opaque_callback_data == "campaign-42"
    assert statuses[0].pricing is not None
    assert statuses[0].pricing.category == "marketing"
    assert statuses[1].errors is not None
    assert statuses[1].errors[0].code == 131026
    assert list(notification.iter_messages()) == []


def test_inbound_media_has_no_outbound_source_link() -> None:
    message = event_message_adapter.validate_python(
        {**BASE, "type": "image", "image": INBOUND_PAYLOADS[MessageType.IMAGE]}
    )

    assert isinstance(message, ImageEventMessage)
    assert message.image.id == "media-3"
    assert "link" not in ImageEventMessage.model_fields["image"].annotation.model_fields


def test_unknown_message_type_falls_back_to_loose_model() -> None:
    raw = {**BASE, "type": "request_welcome", "request_welcome": {}}

    message = event_message_adapter.validate_python(raw)

    assert isinstance(message, UnknownEventMessage)
    assert message.type == "request_welcome"
    dumped = event_message_adapter.dump_python(message, mode="json", by_alias=True, exclude_none=True)
    assert dumped == raw


def test_non_messages_field_keeps_raw_value() -> None:
    value = {"event": "APPROVED", "message_template_id": 12345678, "message_template_name": "hello_world"}
    notification = EventNotification.model_validate(
        {
            "object": "whatsapp_business_account",
            "entry": [{"id": "WABA_ID", "changes": [{"field": "message_template_status_update", "value": value}]}],
        }
    )

    change = notification.entry[0].changes[0]
    assert change.value == value
    assert list(notification.iter_messages()) == []
    assert list(notification.iter_statuses()) == []


def test_messages_field_still_validated() -> None:
    with pytest.raises(ValidationError):
        EventNotification.model_validate(
            {
                "object": "whatsapp_business_account",
                "entry": [{"id": "WABA_ID", "changes": [{"field": "messages", "value": {"event": "x"}}]}],
            }
        )
