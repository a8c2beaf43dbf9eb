from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from whatsapp_cloud.schemas.common import GraphModel, Paging, PhoneNumberID


class PhoneNumberField(StrEnum):
    ID = "id"
    ACCOUNT_MODE = "account_mode"
    CODE_VERIFICATION_STATUS = "code_verification_status"
    DISPLAY_PHONE_NUMBER = "display_phone_number"
    IS_OFFICIAL_BUSINESS_ACCOUNT = "is_official_business_account"
    LAST_ONBOARDED_TIME = "last_onboarded_time"
    MESSAGING_LIMIT_TIER = "messaging_limit_tier"
    NAME_STATUS = "name_status"
    PLATFORM_TYPE = "platform_type"
    QUALITY_RATING = "quality_rating"
    STATUS = "status"
    THROUGHPUT = "throughput"
    VERIFIED_NAME = "verified_name"
    WEBHOOK_CONFIGURATION = "webhook_configuration"


class PhoneNumberSort(StrEnum):
    LAST_ONBOARDED_TIME_ASCENDING = "last_onboarded_time_ascending"
    LAST_ONBOARDED_TIME_DESCENDING = "last_onboarded_time_descending"


class Throughput(GraphModel):
    level: str | None = None


class PhoneNumber(GraphModel):
    always_included: ClassVar[frozenset[str]] = frozenset({"id"})

    id: PhoneNumberID | None = None
    account_mode: str | None = None
    code_verification_status: str | None = None
    display_phone_number: str | None = None
    is_official_business_account: bool | None = None
    last_onboarded_time: str | None = None
    messaging_limit_tier: str | None = None
    name_status: str | None = None
    platform_type: str | None = None
    quality_rating: str | None = None
    status: str | None = None
    throughput: Throughput | None = None
    verified_name: str | None = None
    webhook_configuration: dict[str, Any] | None = None


class PhoneNumberList(GraphModel):
    data: list[PhoneNumber] = Field(default_factory=list)
    paging: Paging | None = None


class PhoneNumberFilter(BaseModel):
    """One entry of the ``filtering`` query parameter."""

    field: str
    operator: str
    value: Any
