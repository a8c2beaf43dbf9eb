from __future__ import annotations

import logging
from unittest.mock import AsyncMock, patch

import pytest

from whatsapp_cloud import WhatsApp
from whatsapp_cloud.core.config import Settings
from whatsapp_cloud.core.transport import GraphTransport
from whatsapp_cloud.schemas.message import CreateMessageText, TextMessage


@pytest.mark.asyncio
async def test_resources_share_injected_transport(transport: AsyncMock) -> None:
    transport.request.return_value = {"messaging_product": "whatsapp", "contacts": [], "messages": []}

    async with WhatsApp(transport=transport) as wa:
        assert wa.business_profile._transport is transport
        assert wa.phone_numbers._transport is transport
        assert wa.messages._transport is transport

        await wa.messages.create_message("123", TextMessage(to="1", text=CreateMessageText(body="Hi")))

    transport.request.assert_awaited_once()


@pytest.mark.asyncio
async def test_builds_graph_transport_from_settings(test_settings: Settings) -> None:
    wa = WhatsApp(settings=test_settings)

    assert isinstance(wa.transport, GraphTransport)
    assert wa.transport.settings is test_settings

    with patch.object(GraphTransport, "close", new_callable=AsyncMock) as mock_close:
        await wa.close()

    mock_close.assert_awaited_once()
    await wa.transport.client.aclose()


def test_log_level_applies_to_package_logger() -> None:
    WhatsApp(settings=Settings(log_level="debug"), transport=AsyncMock())

    assert logging.getLogger("whatsapp_cloud").level == logging.DEBUG


def test_unset_log_level_leaves_host_logging_alone() -> None:
    package_logger = logging.getLogger("whatsapp_cloud")
    package_logger.setLevel(logging.ERROR)

    WhatsApp(settings=Settings(log_level=None), transport=AsyncMock())

    assert package_logger.level == logging.ERROR
    package_logger.setLevel(logging.NOTSET)


def test_log_level_is_unset_by_default() -> None:
    assert Settings().log_level is None
