from __future__ import annotations

import types
from pathlib import Path


def test_healthcheck_import() -> None:
    import paypal_kit.healthcheck as hc
    assert isinstance(hc, types.ModuleType)


def test_public_api_exports() -> None:
    import paypal_kit

    for name in ("LinkBuilder", "NotificationVerifier", "VerifiedPayment", "IPNError", "IPNErrorKind"):
        assert hasattr(paypal_kit, name)


def test_env_example_keys_present() -> None:
    # Ensure documented env keys exist in the example template
    root = Path(__file__).resolve().parents[1]
    example = (root / ".env.example").read_text(encoding="utf-8")
    for key in [
        "PAYPAL_SANDBOX",
        "PAYPAL_VERIFY_TIMEOUT",
        "PAYPAL_IPN_DOMAIN",
        "PAYPAL_LINK_BASE_URL",
        "LOG_LEVEL",
    ]:
        assert key in example
