"""Outbound message models.

Every variant of :data:`CreateMessageOptions` pairs a ``type`` tag with a
payload field of the same name, e.g. ``type="location"`` with ``location``.
Variants forbid undeclared keys, so a payload stored under the wrong key is
rejected at validation time. Untyped additions go into ``extra``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from whatsapp_cloud.schemas.common import (
    MESSAGING_PRODUCT,
    AccountID,
    GraphModel,
    MessageID,
    MessageType,
    PhoneNumberString,
    SuccessPayload,
    WhatsappError,
)

OPAQUE_CALLBACK_DATA_MAX_BYTES = 256


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid")


# === Media ===


class CreateMessageMediaSource(_Payload):
    """Uploaded media ``id`` or a public ``link``, exactly one of them."""

    id: str | None = None
    link: str | None = None

    @model_validator(mode="after")
    def check_single_source(self) -> CreateMessageMediaSource:
        if (self.id is None) == (self.link is None):
            raise ValueError("exactly one of 'id' or 'link' must be set")
        return self


class CreateMessageMedia(CreateMessageMediaSource):
    caption: str | None = None


class CreateMessageDocument(CreateMessageMedia):
    filename: str | None = None


# === Contacts ===


class ContactName(_Payload):
    formatted_name: str
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(_Payload):
    phone: str | None = None
    type: str | None = None
    wa_id: str | None = None


class ContactEmail(_Payload):
    email: str | None = None
    type: str | None = None


class ContactAddress(_Payload):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = None


class ContactOrg(_Payload):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactUrl(_Payload):
    url: str | None = None
    type: str | None = None


class CreateMessageContact(_Payload):
    name: ContactName
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    addresses: list[ContactAddress] | None = None
    org: ContactOrg | None = None
    urls: list[ContactUrl] | None = None
    birthday: str | None = None  # YYYY-MM-DD


# === Other payloads ===


class CreateMessageInteractive(_Payload):
    type: str  # button, list, cta_url, product, product_list, flow, ...
    action: dict[str, Any]
    header: dict[str, Any] | None = None
    body: dict[str, Any] | None = None
    footer: dict[str, Any] | None = None


class CreateMessageLocation(_Payload):
    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None


class CreateMessageReaction(_Payload):
    message_id: MessageID
    emoji: str  # empty string removes a previous reaction


class TemplateLanguage(_Payload):
    code: str
    policy: Literal["deterministic"] = "deterministic"


class CreateMessageTemplate(_Payload):
    name: str
    language: TemplateLanguage
    components: list[dict[str, Any]] | None = None


class CreateMessageText(_Payload):
    body: str = Field(max_length=4096)
    preview_url: bool | None = None


# === Options ===


class MessageContext(_Payload):
    """Reference to the message being replied to."""

    message_id: MessageID


class CreateMessageBase(_Payload):
    to: PhoneNumberString
    recipient_type: str = "individual"
    context: MessageContext | None = None
    biz_opaque_callback_data: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("biz_opaque_callback_data")
    @classmethod
    def check_opaque_data_size(cls, value: str | None) -> str | None:
        if value is not None and len(value.encode("utf-8")) > OPAQUE_CALLBACK_DATA_MAX_BYTES:
            raise ValueError(
                f"biz_opaque_callback_data exceeds {OPAQUE_CALLBACK_DATA_MAX_BYTES} bytes"
            )
        return value

    def to_request_body(self) -> dict[str, Any]:
        """Build the JSON body for ``POST {phone-number-id}/messages``.

        Extra keys go in first so they cannot replace the typed fields.
        """
        body: dict[str, Any] = {"messaging_product": MESSAGING_PRODUCT}
        body.update(self.extra)
        body.update(self.model_dump(mode="json", exclude_none=True, exclude={"extra"}))
        body["messaging_product"] = MESSAGING_PRODUCT
        return body


class AudioMessage(CreateMessageBase):
    type: Literal[MessageType.AUDIO] = MessageType.AUDIO
    audio: CreateMessageMediaSource


class ContactsMessage(CreateMessageBase):
    type: Literal[MessageType.CONTACTS] = MessageType.CONTACTS
    contacts: list[CreateMessageContact] = Field(min_length=1)


class DocumentMessage(CreateMessageBase):
    type: Literal[MessageType.DOCUMENT] = MessageType.DOCUMENT
    document: CreateMessageDocument


class ImageMessage(CreateMessageBase):
    type: Literal[MessageType.IMAGE] = MessageType.IMAGE
    image: CreateMessageMedia


class InteractiveMessage(CreateMessageBase):
    type: Literal[MessageType.INTERACTIVE] = MessageType.INTERACTIVE
    interactive: CreateMessageInteractive


class LocationMessage(CreateMessageBase):
    type: Literal[MessageType.LOCATION] = MessageType.LOCATION
    location: CreateMessageLocation


class ReactionMessage(CreateMessageBase):
    type: Literal[MessageType.REACTION] = MessageType.REACTION
    reaction: CreateMessageReaction


class StickerMessage(CreateMessageBase):
    type: Literal[MessageType.STICKER] = MessageType.STICKER
    sticker: CreateMessageMediaSource


class TemplateMessage(CreateMessageBase):
    type: Literal[MessageType.TEMPLATE] = MessageType.TEMPLATE
    template: CreateMessageTemplate


class TextMessage(CreateMessageBase):
    type: Literal[MessageType.TEXT] = MessageType.TEXT
    text: CreateMessageText


class VideoMessage(CreateMessageBase):
    type: Literal[MessageType.VIDEO] = MessageType.VIDEO
    video: CreateMessageMedia


CreateMessageOptions = Annotated[
    AudioMessage
    | ContactsMessage
    | DocumentMessage
    | ImageMessage
    | InteractiveMessage
    | LocationMessage
    | ReactionMessage
    | StickerMessage
    | TemplateMessage
    | TextMessage
    | VideoMessage,
    Field(discriminator="type"),
]

create_message_options_adapter: TypeAdapter[CreateMessageOptions] = TypeAdapter(
    CreateMessageOptions
)


# === Response ===


class CreateMessageContactResult(GraphModel):
    input: PhoneNumberString
    wa_id: AccountID


class CreateMessageResult(GraphModel):
    id: MessageID
    # "accepted" or "held_for_quality_assessment"; absent on older API versions
    message_status: str | None = None


class CreateMessagePayload(GraphModel):
    messaging_product: str = MESSAGING_PRODUCT
    contacts: list[CreateMessageContactResult] = Field(default_factory=list)
    messages: list[CreateMessageResult] = Field(default_factory=list)
    error: WhatsappError | None = None


class MarkAsReadPayload(SuccessPayload):
    pass
