from paypal_kit.paypal.data import VerifiedPayment
from paypal_kit.paypal.errors import IPNError, IPNErrorKind, OriginError, VerificationError
from paypal_kit.paypal.ipn import NotificationVerifier
from paypal_kit.paypal.link_builder import LinkBuilder

__all__ = [
    "IPNError",
    "IPNErrorKind",
    "LinkBuilder",
    "NotificationVerifier",
    "OriginError",
    "VerificationError",
    "VerifiedPayment",
]
