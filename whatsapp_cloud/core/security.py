from __future__ import annotations

import hashlib
import hmac

from whatsapp_cloud.core.exceptions import WebhookVerificationError

SIGNATURE_PREFIX = "sha256="


def compute_signature(payload: bytes, secret: str) -> str:
    """Compute HMAC-SHA256 signature for payload verification."""
    return hmac.new(
        secret.encode(),
        payload,
        hashlib.sha256,
    ).hexdigest()


def verify_signature(payload: bytes, signature_header: str | None, secret: str) -> bool:
    """Check an ``X-Hub-Signature-256`` header against the raw request body."""
    if not signature_header or not signature_header.startswith(SIGNATURE_PREFIX):
        return False

    received = signature_header[len(SIGNATURE_PREFIX) :]
    expected = compute_signature(payload, secret)
    return hmac.compare_digest(received.encode(), expected.encode())


def verify_subscription(
    mode: str | None,
    token: str | None,
    challenge: str | None,
    verify_token: str,
) -> str:
    """Answer the webhook subscription handshake.

    Returns the challenge to echo back, or raises WebhookVerificationError.
    """
    if mode != "subscribe" or not verify_token or challenge is None:
        raise WebhookVerificationError("Invalid webhook subscription request")

    if not hmac.compare_digest((token or "").encode(), verify_token.encode()):
        raise WebhookVerificationError("Invalid webhook verify token")

    return challenge
