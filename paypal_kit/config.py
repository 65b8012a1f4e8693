from __future__ import annotations

import os
from dataclasses import dataclass, field

from paypal_kit.paypal.constants import DEFAULT_LINK_BASE_URL, IPN_DOMAIN


def _parse_bool(raw: str | None, default: bool = False) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _parse_float(raw: str | None, default: float) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    # Read at instantiation so a .env loaded at startup is honoured.
    app_env: str = field(default_factory=lambda: _env("APP_ENV", "production"))

    paypal_sandbox: bool = field(default_factory=lambda: _parse_bool(os.getenv("PAYPAL_SANDBOX")))
    # seconds; applies to the whole verification round-trip
    verify_timeout: float = field(default_factory=lambda: _parse_float(os.getenv("PAYPAL_VERIFY_TIMEOUT"), 30.0))
    ipn_domain: str = field(default_factory=lambda: _env("PAYPAL_IPN_DOMAIN", IPN_DOMAIN))
    link_base_url: str = field(default_factory=lambda: _env("PAYPAL_LINK_BASE_URL", DEFAULT_LINK_BASE_URL))

    healthcheck_skip_paypal: bool = field(default_factory=lambda: _parse_bool(os.getenv("HEALTHCHECK_SKIP_PAYPAL")))


settings = Settings()
