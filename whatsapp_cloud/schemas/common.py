from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict

# Opaque Graph API identifiers. Message IDs usually start with "wamid."
# but nothing relies on it.
AccountID = str
BusinessAccountID = str
MessageID = str
PhoneNumberID = str
PhoneNumberString = str

MESSAGING_PRODUCT = "whatsapp"


class MessageType(StrEnum):
    AUDIO = "audio"
    CONTACTS = "contacts"
    DOCUMENT = "document"
    IMAGE = "image"
    INTERACTIVE = "interactive"  # list and reply button messages
    LOCATION = "location"
    REACTION = "reaction"
    STICKER = "sticker"
    SYSTEM = "system"  # inbound only
    BUTTON = "button"  # inbound only
    ORDER = "order"  # inbound only
    TEMPLATE = "template"
    TEXT = "text"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"  # inbound only


INBOUND_ONLY_MESSAGE_TYPES = frozenset(
    {
        MessageType.SYSTEM,
        MessageType.BUTTON,
        MessageType.ORDER,
        MessageType.UNSUPPORTED,
    }
)

OUTBOUND_MESSAGE_TYPES = frozenset(MessageType) - INBOUND_ONLY_MESSAGE_TYPES


class GraphModel(BaseModel):
    """Base for Graph API response objects.

    Unknown keys are kept so newer API fields survive a parse/dump cycle.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Keys returned by the API regardless of the requested field set.
    always_included: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def project(cls, data: Mapping[str, Any], fields: Iterable[str] | None) -> Self:
        """Parse ``data`` keeping only the requested fields.

        With no fields requested the server default set is parsed untouched.
        """
        if not fields:
            return cls.model_validate(data)

        wanted = set(fields) | cls.always_included
        return cls.model_validate({k: v for k, v in data.items() if k in wanted})


class WhatsappError(GraphModel):
    """Error object reported by the API in responses and webhooks."""

    code: int
    message: str | None = None
    type: str | None = None
    title: str | None = None
    error_subcode: int | None = None
    error_user_title: str | None = None
    error_user_msg: str | None = None
    error_data: dict[str, Any] | None = None
    fbtrace_id: str | None = None
    href: str | None = None


class Cursors(GraphModel):
    before: str | None = None
    after: str | None = None


class Paging(GraphModel):
    cursors: Cursors | None = None
    previous: str | None = None
    next: str | None = None


class SuccessPayload(GraphModel):
    success: bool


def field_names(fields: Mapping[str, Any] | Iterable[str] | None) -> list[str]:
    """Normalize a field selection to an ordered list of names.

    Mappings select by key (values are ignored), mirroring ``{"name": True}``.
    """
    if not fields:
        return []
    if isinstance(fields, str):
        return [fields]
    return [str(name) for name in fields]
