"""PayPal Website Payments Standard helpers: checkout links and IPN verification."""

from paypal_kit.paypal import (
    IPNError,
    IPNErrorKind,
    LinkBuilder,
    NotificationVerifier,
    OriginError,
    VerificationError,
    VerifiedPayment,
)

__version__ = "0.1.0"

__all__ = [
    "IPNError",
    "IPNErrorKind",
    "LinkBuilder",
    "NotificationVerifier",
    "OriginError",
    "VerificationError",
    "VerifiedPayment",
]
