from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from whatsapp_cloud.schemas.common import GraphModel, SuccessPayload


class BusinessProfileField(StrEnum):
    ABOUT = "about"
    ADDRESS = "address"
    DESCRIPTION = "description"
    EMAIL = "email"
    MESSAGING_PRODUCT = "messaging_product"
    PROFILE_PICTURE_URL = "profile_picture_url"
    VERTICAL = "vertical"
    WEBSITES = "websites"


class BusinessVertical(StrEnum):
    UNDEFINED = "UNDEFINED"
    OTHER = "OTHER"
    AUTO = "AUTO"
    BEAUTY = "BEAUTY"
    APPAREL = "APPAREL"
    EDU = "EDU"
    ENTERTAIN = "ENTERTAIN"
    EVENT_PLAN = "EVENT_PLAN"
    FINANCE = "FINANCE"
    GROCERY = "GROCERY"
    GOVT = "GOVT"
    HOTEL = "HOTEL"
    HEALTH = "HEALTH"
    NONPROFIT = "NONPROFIT"
    PROF_SERVICES = "PROF_SERVICES"
    RETAIL = "RETAIL"
    TRAVEL = "TRAVEL"
    RESTAURANT = "RESTAURANT"
    NOT_A_BIZ = "NOT_A_BIZ"


class BusinessProfile(GraphModel):
    always_included: ClassVar[frozenset[str]] = frozenset({"messaging_product"})

    messaging_product: str | None = None
    about: str | None = None
    address: str | None = None
    description: str | None = None
    email: str | None = None
    profile_picture_url: str | None = None
    vertical: str | None = None
    websites: list[str] | None = None


class BusinessProfilePayload(GraphModel):
    data: list[BusinessProfile] = Field(default_factory=list)


class UpdateBusinessProfile(BaseModel):
    """Writable profile attributes. Undeclared keys are sent through as-is."""

    model_config = ConfigDict(extra="allow")

    about: str | None = Field(default=None, min_length=1, max_length=139)
    address: str | None = Field(default=None, max_length=256)
    description: str | None = Field(default=None, max_length=512)
    email: str | None = Field(default=None, max_length=128)
    profile_picture_handle: str | None = None
    vertical: BusinessVertical | str | None = None
    websites: list[str] | None = Field(default=None, max_length=2)


class UpdateBusinessProfilePayload(SuccessPayload):
    pass
