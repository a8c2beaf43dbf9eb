from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from whatsapp_cloud.core.transport import RequestOptions, encode_path_segment
from whatsapp_cloud.resources.base import Resource
from whatsapp_cloud.schemas.business_profile import (
    BusinessProfile,
    BusinessProfilePayload,
    UpdateBusinessProfile,
    UpdateBusinessProfilePayload,
)
from whatsapp_cloud.schemas.common import MESSAGING_PRODUCT, PhoneNumberID, field_names


class BusinessProfileResource(Resource):
    """Read and update the business profile behind a phone number."""

    def get_endpoint(self, phone_number_id: PhoneNumberID) -> str:
        return f"{encode_path_segment(phone_number_id)}/whatsapp_business_profile"

    async def get_business_profile(
        self,
        phone_number_id: PhoneNumberID,
        fields: Mapping[str, Any] | Iterable[str] | None = None,
        request: RequestOptions | None = None,
    ) -> BusinessProfilePayload:
        """Fetch the profile, restricted to ``fields`` when given.

        An empty selection sends ``fields=`` and lets the API pick its defaults.
        """
        names = field_names(fields)
        data = await self._transport.request(
            "GET",
            self.get_endpoint(phone_number_id),
            params={"fields": ",".join(names)},
            request=request,
        )

        return BusinessProfilePayload(
            data=[BusinessProfile.project(item, names) for item in data.get("data", [])],
            **{k: v for k, v in data.items() if k != "data"},
        )

    async def update_business_profile(
        self,
        phone_number_id: PhoneNumberID,
        request: RequestOptions | None = None,
        **profile_fields: Any,
    ) -> UpdateBusinessProfilePayload:
        """Update profile attributes; only the supplied ones are sent."""
        profile_fields.pop("messaging_product", None)
        profile = UpdateBusinessProfile.model_validate(profile_fields)

        data = await self._transport.request(
            "POST",
            self.get_endpoint(phone_number_id),
            json={
                "messaging_product": MESSAGING_PRODUCT,
                **profile.model_dump(mode="json", exclude_none=True),
            },
            request=request,
        )
        return UpdateBusinessProfilePayload.model_validate(data)
