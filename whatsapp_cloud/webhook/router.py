from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from whatsapp_cloud.core.config import Settings, settings as default_settings
from whatsapp_cloud.core.exceptions import WebhookVerificationError
from whatsapp_cloud.core.security import verify_signature, verify_subscription
from whatsapp_cloud.schemas.webhook import EventNotification

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[EventNotification], Awaitable[None]]


def create_webhook_router(
    handler: NotificationHandler,
    settings: Settings | None = None,
    path: str = "/webhook",
) -> APIRouter:
    """Build a router answering Meta's webhook handshake and notifications.

    ``path`` must match the callback URL configured in the Meta app.
    """
    config = settings or default_settings
    router = APIRouter()

    @router.get(path, response_class=PlainTextResponse)
    async def verify_webhook(
        mode: str | None = Query(None, alias="hub.mode"),
        token: str | None = Query(None, alias="hub.verify_token"),
        challenge: str | None = Query(None, alias="hub.challenge"),
    ) -> str:
        """Echo the challenge back when the verify token matches."""
        try:
            return verify_subscription(mode, token, challenge, config.webhook_verify_token)
        except WebhookVerificationError as e:
            logger.warning("Rejected webhook subscription: %s", e)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    @router.post(path)
    async def receive_webhook(request: Request) -> dict[str, bool]:
        """Receive event notifications (messages and statuses)."""
        body = await request.body()

        # Skip verification when no app secret is configured (development)
        if config.app_secret and not verify_signature(
            body, request.headers.get("X-Hub-Signature-256"), config.app_secret
        ):
            logger.warning("Rejected webhook with invalid signature")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid webhook signature",
            )

        try:
            notification = EventNotification.model_validate_json(body)
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid webhook payload",
            ) from e

        logger.info("Received %s webhook with %d entries", notification.object, len(notification.entry))
        await handler(notification)
        return {"ok": True}

    return router
