"""
Signature — authenticate webhook deliveries.

    from reconciler import signature as S

    verdict = S.verify(raw_body, header_value, secret)
"""

from reconciler.signature._verify import (
    Verdict,
    SignatureVerifier,
    sign,
    verify,
)

__all__ = (
    "Verdict",
    "SignatureVerifier",
    "sign",
    "verify",
)
