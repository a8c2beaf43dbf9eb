"""Pydantic models for WhatsApp Cloud API webhook event notifications."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Any, Literal

from pydantic import Discriminator, Field, Tag, TypeAdapter, ValidationInfo, field_validator

from whatsapp_cloud.schemas.common import (
    AccountID,
    GraphModel,
    MessageID,
    MessageType,
    PhoneNumberID,
    WhatsappError,
)

# === Message payloads ===


class EventMedia(GraphModel):
    """Media received from a customer; download it through its ``id``."""

    id: str
    mime_type: str | None = None
    sha256: str | None = None


class EventAudio(EventMedia):
    voice: bool | None = None


class EventCaptionedMedia(EventMedia):
    caption: str | None = None


class EventDocument(EventCaptionedMedia):
    filename: str | None = None


class EventSticker(EventMedia):
    animated: bool | None = None


class EventContactName(GraphModel):
    formatted_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class EventContact(GraphModel):
    name: EventContactName | None = None
    phones: list[dict[str, Any]] | None = None
    emails: list[dict[str, Any]] | None = None
    addresses: list[dict[str, Any]] | None = None
    org: dict[str, Any] | None = None
    urls: list[dict[str, Any]] | None = None
    birthday: str | None = None


class EventReply(GraphModel):
    id: str
    title: str
    description: str | None = None


class EventInteractive(GraphModel):
    type: str  # button_reply, list_reply, nfm_reply
    button_reply: EventReply | None = None
    list_reply: EventReply | None = None
    nfm_reply: dict[str, Any] | None = None


class EventLocation(GraphModel):
    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None
    url: str | None = None


class EventReaction(GraphModel):
    message_id: MessageID
    emoji: str | None = None  # absent when the reaction was removed


class EventSystem(GraphModel):
    body: str | None = None
    type: str | None = None  # customer_changed_number, customer_identity_changed
    identity: str | None = None
    new_wa_id: AccountID | None = None
    wa_id: AccountID | None = None
    customer: str | None = None


class EventButton(GraphModel):
    payload: str | None = None
    text: str | None = None


class EventOrderItem(GraphModel):
    product_retailer_id: str
    quantity: int | str
    item_price: float | str
    currency: str


class EventOrder(GraphModel):
    catalog_id: str
    text: str | None = None
    product_items: list[EventOrderItem] = Field(default_factory=list)


class EventText(GraphModel):
    body: str


class EventUnsupported(GraphModel):
    type: str | None = None


# === Messages ===


class EventMessageContext(GraphModel):
    from_: str | None = Field(default=None, alias="from")
    id: MessageID | None = None
    forwarded: bool | None = None
    frequently_forwarded: bool | None = None
    referred_product: dict[str, Any] | None = None


class EventNotificationMessageBase(GraphModel):
    from_: AccountID = Field(alias="from")
    id: MessageID
    timestamp: str
    context: EventMessageContext | None = None
    errors: list[WhatsappError] | None = None
    referral: dict[str, Any] | None = None


class AudioEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.AUDIO]
    audio: EventAudio


class ButtonEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.BUTTON]
    button: EventButton


class ContactsEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.CONTACTS]
    contacts: list[EventContact]


class DocumentEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.DOCUMENT]
    document: EventDocument


class ImageEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.IMAGE]
    image: EventCaptionedMedia


class InteractiveEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.INTERACTIVE]
    interactive: EventInteractive


class LocationEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.LOCATION]
    location: EventLocation


class OrderEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.ORDER]
    order: EventOrder


class ReactionEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.REACTION]
    reaction: EventReaction


class StickerEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.STICKER]
    sticker: EventSticker


class SystemEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.SYSTEM]
    system: EventSystem


class TextEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.TEXT]
    text: EventText


class UnsupportedEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.UNSUPPORTED]
    unsupported: EventUnsupported | None = None


class VideoEventMessage(EventNotificationMessageBase):
    type: Literal[MessageType.VIDEO]
    video: EventCaptionedMedia


class UnknownEventMessage(EventNotificationMessageBase):
    """Message whose ``type`` is newer than :class:`MessageType`; payload kept as extra keys."""

    type: str


UNKNOWN_MESSAGE_TAG = "unknown"
# Template messages are never delivered inbound
_KNOWN_MESSAGE_TAGS = frozenset(tag.value for tag in MessageType if tag is not MessageType.TEMPLATE)


def _message_tag(value: Any) -> str:
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return str(tag) if tag in _KNOWN_MESSAGE_TAGS else UNKNOWN_MESSAGE_TAG


EventNotificationMessage = Annotated[
    Annotated[AudioEventMessage, Tag(MessageType.AUDIO.value)]
    | Annotated[ButtonEventMessage, Tag(MessageType.BUTTON.value)]
    | Annotated[ContactsEventMessage, Tag(MessageType.CONTACTS.value)]
    | Annotated[DocumentEventMessage, Tag(MessageType.DOCUMENT.value)]
    | Annotated[ImageEventMessage, Tag(MessageType.IMAGE.value)]
    | Annotated[InteractiveEventMessage, Tag(MessageType.INTERACTIVE.value)]
    | Annotated[LocationEventMessage, Tag(MessageType.LOCATION.value)]
    | Annotated[OrderEventMessage, Tag(MessageType.ORDER.value)]
    | Annotated[ReactionEventMessage, Tag(MessageType.REACTION.value)]
    | Annotated[StickerEventMessage, Tag(MessageType.STICKER.value)]
    | Annotated[SystemEventMessage, Tag(MessageType.SYSTEM.value)]
    | Annotated[TextEventMessage, Tag(MessageType.TEXT.value)]
    | Annotated[UnsupportedEventMessage, Tag(MessageType.UNSUPPORTED.value)]
    | Annotated[VideoEventMessage, Tag(MessageType.VIDEO.value)]
    | Annotated[UnknownEventMessage, Tag(UNKNOWN_MESSAGE_TAG)],
    Discriminator(_message_tag),
]

event_message_adapter: TypeAdapter[EventNotificationMessage] = TypeAdapter(
    EventNotificationMessage
)


# === Statuses ===


class ConversationOrigin(GraphModel):
    type: str


class EventConversation(GraphModel):
    id: str
    origin: ConversationOrigin | None = None
    expiration_timestamp: str | None = None


class EventPricing(GraphModel):
    billable: bool | None = None
    pricing_model: str | None = None
    category: str | None = None


class EventStatus(GraphModel):
    id: MessageID
    status: str  # sent, delivered, read, failed, deleted
    timestamp: str
    recipient_id: AccountID
    biz_opaque_callback_data: str | None = None
    conversation: EventConversation | None = None
    pricing: EventPricing | None = None
    errors: list[WhatsappError] | None = None


# === Envelope ===


class EventProfile(GraphModel):
    name: str | None = None


class EventSender(GraphModel):
    wa_id: AccountID
    profile: EventProfile | None = None


class EventMetadata(GraphModel):
    display_phone_number: str
    phone_number_id: PhoneNumberID


class EventValue(GraphModel):
    messaging_product: str
    metadata: EventMetadata
    contacts: list[EventSender] = Field(default_factory=list)
    messages: list[EventNotificationMessage] = Field(default_factory=list)
    statuses: list[EventStatus] = Field(default_factory=list)
    errors: list[WhatsappError] = Field(default_factory=list)


class EventChange(GraphModel):
    """One subscribed field's update.

    Only the ``messages`` field is modelled; other fields (template status,
    account updates, ...) keep their ``value`` as a plain mapping.
    """

    field: str
    value: EventValue | dict[str, Any]

    @field_validator("value", mode="plain")
    @classmethod
    def parse_value(cls, value: Any, info: ValidationInfo) -> EventValue | dict[str, Any]:
        if isinstance(value, EventValue):
            return value
        if info.data.get("field") == "messages":
            return EventValue.model_validate(value)
        if not isinstance(value, dict):
            raise ValueError("change value must be an object")
        return value


class EventEntry(GraphModel):
    id: str  # WhatsApp Business Account ID
    changes: list[EventChange] = Field(default_factory=list)


class EventNotification(GraphModel):
    """Full webhook payload as POSTed by Meta."""

    object: str
    entry: list[EventEntry] = Field(default_factory=list)

    def iter_messages(self) -> Iterator[tuple[EventMetadata, EventNotificationMessage]]:
        """Yield every received message with the metadata of the number it reached."""
        for entry in self.entry:
            for change in entry.changes:
                if isinstance(change.value, EventValue):
                    for message in change.value.messages:
                        yield change.value.metadata, message

    def iter_statuses(self) -> Iterator[tuple[EventMetadata, EventStatus]]:
        for entry in self.entry:
            for change in entry.changes:
                if isinstance(change.value, EventValue):
                    for status in change.value.statuses:
                        yield change.value.metadata, status
