"""
Signature verification — HMAC-SHA256 over the raw request body.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from enum import Enum, auto


# ═══════════════════════════════════════════════════════════════════════════════
# Verdict
# ═══════════════════════════════════════════════════════════════════════════════


class Verdict(Enum):
    """
    Outcome of a signature check.

    AUTHENTIC:    digest matches; continue processing.
    FORGED:       digest missing or mismatched; answer 400 and touch nothing.
    UNCONFIGURED: no shared secret; answer 500 (fail closed).
    """

    AUTHENTIC = auto()
    FORGED = auto()
    UNCONFIGURED = auto()


def sign(body: bytes, secret: str) -> str:
    """Lowercase hex HMAC-SHA256 of body keyed by secret."""
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def verify(body: bytes, signature: str | None, secret: str | None) -> Verdict:
    """
    Check a webhook signature.

    Note: body must be the raw bytes as received. Re-serializing parsed JSON
    changes key order/whitespace and breaks legitimate signatures.
    """
    if not secret:
        return Verdict.UNCONFIGURED
    if not signature:
        return Verdict.FORGED

    expected = sign(body, secret)
    if hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
        return Verdict.AUTHENTIC
    return Verdict.FORGED


# ═══════════════════════════════════════════════════════════════════════════════
# Verifier — bound to a secret
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SignatureVerifier:
    """
    Verifier bound to one shared secret.

    Example:
        verifier = SignatureVerifier(settings.webhook_secret)
        match verifier.verify(raw_body, header):
            case Verdict.AUTHENTIC: ...
    """

    secret: str | None

    @property
    def configured(self) -> bool:
        return bool(self.secret)

    def verify(self, body: bytes, signature: str | None) -> Verdict:
        return verify(body, signature, self.secret)


__all__ = (
    "Verdict",
    "SignatureVerifier",
    "sign",
    "verify",
)
