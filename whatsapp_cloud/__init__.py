"""Async client for the WhatsApp Cloud API."""

from __future__ import annotations

from whatsapp_cloud.client import WhatsApp
from whatsapp_cloud.core.config import Settings
from whatsapp_cloud.core.exceptions import WebhookVerificationError, WhatsAppCloudError
from whatsapp_cloud.core.transport import GraphTransport, Transport
from whatsapp_cloud.webhook.router import create_webhook_router

__version__ = "0.1.0"

__all__ = [
    "GraphTransport",
    "Settings",
    "Transport",
    "WebhookVerificationError",
    "WhatsApp",
    "WhatsAppCloudError",
    "create_webhook_router",
]
