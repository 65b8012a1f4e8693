"""
IPN verification errors.

A single exception type carries an explicit ``kind`` so callers can branch on
it without relying on class identity:

    try:
        payment = verifier.verify(fields, remote_addr)
    except IPNError as e:
        if e.kind is IPNErrorKind.ORIGIN:
            ...

``OriginError`` and ``VerificationError`` are thin subclasses that pin the kind.
"""

from __future__ import annotations

from enum import Enum


class IPNErrorKind(str, Enum):
    ORIGIN = "origin"
    VERIFICATION = "verification"


class IPNError(Exception):
    """Base error for notification verification."""

    def __init__(self, kind: IPNErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class OriginError(IPNError):
    """Reverse DNS of the sender does not match the provider's notification host."""

    def __init__(self, message: str) -> None:
        super().__init__(IPNErrorKind.ORIGIN, message)


class VerificationError(IPNError):
    """Transport failure, INVALID token, or an unrecognised response body."""

    def __init__(self, message: str) -> None:
        super().__init__(IPNErrorKind.VERIFICATION, message)
