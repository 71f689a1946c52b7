"""
Configuration — explicitly injected, never global.

    settings = Settings.from_env()
    settings = Settings(webhook_secret="whsec").with_credentials("rzp_key", "rzp_secret")
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import timedelta


DEFAULT_GATEWAY = "razorpay"
DEFAULT_SIGNATURE_HEADER = "x-razorpay-signature"
DEFAULT_API_BASE_URL = "https://api.razorpay.com/v1"
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./reconciler.db"
DEFAULT_WEBHOOK_PATH = "/webhooks/razorpay"


def _first(environ: Mapping[str, str], *names: str) -> str | None:
    """First non-empty value among names."""
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


# ═══════════════════════════════════════════════════════════════════════════════
# Settings
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Reconciler configuration.

    Immutable: each with_* method returns a new Settings, so one instance
    can be shared by concurrent requests and tests can derive variants freely.

    webhook_secret: shared HMAC secret. None means "not configured" and every
        delivery is answered with 500 (fail closed).
    key_id / key_secret: gateway private API credentials. Both must be set for
        server-to-server confirmation; otherwise the guard runs in degraded
        mode (signature + amount/currency only).
    """

    webhook_secret: str | None = None
    key_id: str | None = None
    key_secret: str | None = None
    gateway: str = DEFAULT_GATEWAY
    signature_header: str = DEFAULT_SIGNATURE_HEADER
    api_base_url: str = DEFAULT_API_BASE_URL
    confirm_timeout: timedelta = timedelta(seconds=10)
    database_url: str = DEFAULT_DATABASE_URL
    webhook_path: str = DEFAULT_WEBHOOK_PATH

    @property
    def has_api_credentials(self) -> bool:
        return bool(self.key_id) and bool(self.key_secret)

    def with_secret(self, secret: str | None) -> Settings:
        return replace(self, webhook_secret=secret or None)

    def with_credentials(self, key_id: str | None, key_secret: str | None) -> Settings:
        return replace(self, key_id=key_id or None, key_secret=key_secret or None)

    def with_confirm_timeout(
        self,
        *,
        seconds: float | None = None,
        delta: timedelta | None = None,
    ) -> Settings:
        """
        Set timeout for server-to-server confirmation calls.

        Example:
            .with_confirm_timeout(seconds=5)
        """
        timeout = delta if delta else timedelta(seconds=seconds or 10)
        return replace(self, confirm_timeout=timeout)

    def with_database_url(self, url: str) -> Settings:
        return replace(self, database_url=url)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Read settings from environment variables.

        RAZORPAY_* names win over the legacy RZP_* names; empty values count
        as unset.
        """
        env = os.environ if environ is None else environ

        timeout_raw = _first(env, "RAZORPAY_CONFIRM_TIMEOUT")
        timeout = (
            timedelta(seconds=float(timeout_raw))
            if timeout_raw
            else timedelta(seconds=10)
        )

        return cls(
            webhook_secret=_first(env, "RAZORPAY_WEBHOOK_SECRET", "RZP_WEBHOOK_SECRET"),
            key_id=_first(env, "RAZORPAY_KEY_ID", "RZP_KEY_ID"),
            key_secret=_first(env, "RAZORPAY_KEY_SECRET", "RZP_KEY_SECRET"),
            api_base_url=_first(env, "RAZORPAY_API_BASE_URL") or DEFAULT_API_BASE_URL,
            confirm_timeout=timeout,
            database_url=_first(env, "DATABASE_URL") or DEFAULT_DATABASE_URL,
            webhook_path=_first(env, "WEBHOOK_PATH") or DEFAULT_WEBHOOK_PATH,
        )


__all__ = (
    "Settings",
    "DEFAULT_GATEWAY",
    "DEFAULT_SIGNATURE_HEADER",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_DATABASE_URL",
    "DEFAULT_WEBHOOK_PATH",
)
