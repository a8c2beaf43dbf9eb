from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from whatsapp_cloud.core.transport import RequestOptions, encode_path_segment
from whatsapp_cloud.resources.base import Resource
from whatsapp_cloud.schemas.common import BusinessAccountID, PhoneNumberID, field_names
from whatsapp_cloud.schemas.phone_number import (
    PhoneNumber,
    PhoneNumberFilter,
    PhoneNumberList,
    PhoneNumberSort,
)


class PhoneNumbersResource(Resource):
    """Phone numbers registered under a WhatsApp Business Account."""

    def get_endpoint(self, business_account_id: BusinessAccountID) -> str:
        return f"{encode_path_segment(business_account_id)}/phone_numbers"

    async def get_phone_number(
        self,
        phone_number_id: PhoneNumberID,
        fields: Mapping[str, Any] | Iterable[str] | None = None,
        request: RequestOptions | None = None,
    ) -> PhoneNumber:
        names = field_names(fields)
        data = await self._transport.request(
            "GET",
            encode_path_segment(phone_number_id),
            params={"fields": ",".join(names)},
            request=request,
        )
        return PhoneNumber.project(data, names)

    async def list_phone_numbers(
        self,
        business_account_id: BusinessAccountID,
        sort: PhoneNumberSort | str | None = None,
        filtering: str | Sequence[PhoneNumberFilter | Mapping[str, Any]] | None = None,
        request: RequestOptions | None = None,
    ) -> PhoneNumberList:
        """List the account's phone numbers.

        ``sort`` and ``filtering`` are only sent when given. A filter list is
        JSON-encoded, a string is sent verbatim.
        """
        params: dict[str, Any] = {}
        if sort:
            params["sort"] = str(sort)
        if filtering:
            params["filtering"] = _encode_filtering(filtering)

        data = await self._transport.request(
            "GET",
            self.get_endpoint(business_account_id),
            params=params,
            request=request,
        )
        return PhoneNumberList.model_validate(data)


def _encode_filtering(filtering: str | Sequence[PhoneNumberFilter | Mapping[str, Any]]) -> str:
    if isinstance(filtering, str):
        return filtering

    filters = [PhoneNumberFilter.model_validate(item) for item in filtering]
    return json.dumps([f.model_dump(mode="json") for f in filters], separators=(",", ":"))
