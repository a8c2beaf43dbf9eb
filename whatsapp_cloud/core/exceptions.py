from __future__ import annotations


class WhatsAppCloudError(Exception):
    """Base class for errors raised by this package itself.

    HTTP failures are not wrapped: httpx exceptions reach the caller as-is.
    """


class WebhookVerificationError(WhatsAppCloudError):
    """Webhook subscription handshake or payload signature did not match."""
