from __future__ import annotations

from .business_profile import (
    BusinessProfile,
    BusinessProfileField,
    BusinessProfilePayload,
    BusinessVertical,
    UpdateBusinessProfile,
    UpdateBusinessProfilePayload,
)
from .common import (
    INBOUND_ONLY_MESSAGE_TYPES,
    MESSAGING_PRODUCT,
    OUTBOUND_MESSAGE_TYPES,
    AccountID,
    BusinessAccountID,
    Cursors,
    GraphModel,
    MessageID,
    MessageType,
    Paging,
    PhoneNumberID,
    PhoneNumberString,
    SuccessPayload,
    WhatsappError,
)
from .message import (
    AudioMessage,
    ContactsMessage,
    CreateMessageBase,
    CreateMessageContact,
    CreateMessageDocument,
    CreateMessageInteractive,
    CreateMessageLocation,
    CreateMessageMedia,
    CreateMessageMediaSource,
    CreateMessageOptions,
    CreateMessagePayload,
    CreateMessageReaction,
    CreateMessageTemplate,
    CreateMessageText,
    DocumentMessage,
    ImageMessage,
    InteractiveMessage,
    LocationMessage,
    MarkAsReadPayload,
    MessageContext,
    ReactionMessage,
    StickerMessage,
    TemplateLanguage,
    TemplateMessage,
    TextMessage,
    VideoMessage,
    create_message_options_adapter,
)
from .phone_number import (
    PhoneNumber,
    PhoneNumberField,
    PhoneNumberFilter,
    PhoneNumberList,
    PhoneNumberSort,
)
from .webhook import (
    EventChange,
    EventEntry,
    EventMetadata,
    EventNotification,
    EventNotificationMessage,
    EventSender,
    EventStatus,
    EventValue,
    UnknownEventMessage,
    event_message_adapter,
)

__all__ = [
    # common
    "AccountID",
    "BusinessAccountID",
    "Cursors",
    "GraphModel",
    "INBOUND_ONLY_MESSAGE_TYPES",
    "MESSAGING_PRODUCT",
    "MessageID",
    "MessageType",
    "OUTBOUND_MESSAGE_TYPES",
    "Paging",
    "PhoneNumberID",
    "PhoneNumberString",
    "SuccessPayload",
    "WhatsappError",
    # business profile
    "BusinessProfile",
    "BusinessProfileField",
    "BusinessProfilePayload",
    "BusinessVertical",
    "UpdateBusinessProfile",
    "UpdateBusinessProfilePayload",
    # phone numbers
    "PhoneNumber",
    "PhoneNumberField",
    "PhoneNumberFilter",
    "PhoneNumberList",
    "PhoneNumberSort",
    # messages
    "AudioMessage",
    "ContactsMessage",
    "CreateMessageBase",
    "CreateMessageContact",
    "CreateMessageDocument",
    "CreateMessageInteractive",
    "CreateMessageLocation",
    "CreateMessageMedia",
    "CreateMessageMediaSource",
    "CreateMessageOptions",
    "CreateMessagePayload",
    "CreateMessageReaction",
    "CreateMessageTemplate",
    "CreateMessageText",
    "DocumentMessage",
    "ImageMessage",
    "InteractiveMessage",
    "LocationMessage",
    "MarkAsReadPayload",
    "MessageContext",
    "ReactionMessage",
    "StickerMessage",
    "TemplateLanguage",
    "TemplateMessage",
    "TextMessage",
    "VideoMessage",
    "create_message_options_adapter",
    # webhook
    "EventChange",
    "EventEntry",
    "EventMetadata",
    "EventNotification",
    "EventNotificationMessage",
    "EventSender",
    "EventStatus",
    "EventValue",
    "UnknownEventMessage",
    "event_message_adapter",
]
