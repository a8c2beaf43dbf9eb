from __future__ import annotations

import os

os.environ["WHATSAPP_ACCESS_TOKEN"] = "test-token"
os.environ["WHATSAPP_API_URL"] = "https://graph.test"
os.environ["WHATSAPP_API_VERSION"] = "v21.0"

from typing import Any
from unittest.mock import AsyncMock

import pytest

from whatsapp_cloud.core.config import Settings


@pytest.fixture
def transport() -> AsyncMock:
    """Transport double; set ``transport.request.return_value`` per test."""
    mock = AsyncMock()
    mock.request.return_value = {}
    return mock


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        api_url="https://graph.test",
        api_version="v21.0",
        access_token="test-token",
        app_secret="app-secret",
        webhook_verify_token="verify-me",
    )


@pytest.fixture
def text_webhook_payload() -> dict[str, Any]:
    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": "WABA_ID",
                "changes": [
                    {
                        "field": "messages",
                        "value": {
                            "messaging_product": "whatsapp",
                            "metadata": {
                                "display_phone_number": "15550001111",
                                "phone_number_id": "PHONE_NUMBER_ID",
                            },
                            "contacts": [
                                {"profile": {"name": "Kerry Fisher"}, "wa_id": "16315551234"}
                            ],
                            "messages": [
                                {
                                    "from": "16315551234",
                                    "id": "wamid.ABGGFlCGg0cvAgo-sJQh43L5Pe4W",
                                    "timestamp": "1603059201",
                                    "type": "text",
                                    "text": {"body": "Hello this is an answer"},
                                }
                            ],
                        },
                    }
                ],
            }
        ],
    }
