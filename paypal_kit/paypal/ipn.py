from __future__ import annotations

import asyncio
import logging
import socket
from typing import Any, Callable, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

import httpx

from paypal_kit.config import settings
from paypal_kit.paypal.constants import (
    IPN_URL,
    IPN_URL_SANDBOX,
    RESPONSE_INVALID,
    RESPONSE_VERIFIED,
    VALIDATE_CMD,
)
from paypal_kit.paypal.data import VerifiedPayment
from paypal_kit.paypal.errors import OriginError, VerificationError

logger = logging.getLogger(__name__)

Resolver = Callable[[str], str]


def reverse_lookup(address: str) -> str:
    """Resolve ``address`` to a hostname; on failure return the address unchanged."""
    try:
        return socket.gethostbyaddr(address)[0]
    except (OSError, UnicodeError, ValueError) as e:
        logger.debug("reverse lookup failed for %s: %s", address, e)
        return address


def build_validation_body(raw_fields: Mapping[str, Any]) -> str:
    """Form-encode the echo-back body: the validate marker first, then every field in received order."""
    pairs: List[Tuple[str, str]] = [("cmd", VALIDATE_CMD)]
    for key, value in raw_fields.items():
        if key == "cmd":
            continue
        pairs.append((key, "" if value is None else str(value)))
    return urlencode(pairs)


class NotificationVerifier:
    """Verifies PayPal IPN callbacks by echoing them back to PayPal.

    The instance holds only configuration, so one verifier can be shared across
    requests. ``verify`` blocks for one HTTPS round-trip; asyncio callers should
    use ``averify``.
    """

    def __init__(
        self,
        sandbox: Optional[bool] = None,
        *,
        timeout: Optional[float] = None,
        resolver: Optional[Resolver] = None,
        transport: Any = None,
        ipn_domain: Optional[str] = None,
    ) -> None:
        self.sandbox = settings.paypal_sandbox if sandbox is None else sandbox
        self.timeout = settings.verify_timeout if timeout is None else timeout
        self.ipn_domain = ipn_domain or settings.ipn_domain
        self._resolver: Resolver = resolver or reverse_lookup
        self._transport = transport

    def endpoint(self, sandbox: Optional[bool] = None) -> str:
        use_sandbox = self.sandbox if sandbox is None else sandbox
        return IPN_URL_SANDBOX if use_sandbox else IPN_URL

    def _check_origin(self, hostname: str, remote_addr: str) -> None:
        if hostname != self.ipn_domain:
            logger.warning(
                "IPN rejected: unknown origin",
                extra={"extra": {"remote_addr": remote_addr, "hostname": hostname, "expected": self.ipn_domain}},
            )
            raise OriginError(f"Request from unknown domain: {hostname}")

    def _request_kwargs(self, raw_fields: Mapping[str, Any]) -> dict:
        return {
            "content": build_validation_body(raw_fields).encode("utf-8"),
            "headers": {
                "Content-Type": "application/x-www-form-urlencoded",
                "Connection": "close",
            },
        }

    def _client_kwargs(self) -> dict:
        kwargs: dict = {
            "timeout": httpx.Timeout(self.timeout),
            "verify": True,
            "http1": True,
            "http2": False,
            # a fresh pool per call; nothing is kept alive afterwards
            "limits": httpx.Limits(max_keepalive_connections=0),
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    def _interpret(self, body: str, raw_fields: Mapping[str, Any], use_sandbox: bool) -> VerifiedPayment:
        if use_sandbox and body == RESPONSE_INVALID:
            body = RESPONSE_VERIFIED

        if body == RESPONSE_VERIFIED:
            logger.info("IPN verified", extra={"extra": {"txn_id": raw_fields.get("txn_id"), "sandbox": use_sandbox}})
            return VerifiedPayment(raw_fields)
        if body == RESPONSE_INVALID:
            logger.warning("IPN rejected: provider answered INVALID", extra={"extra": {"txn_id": raw_fields.get("txn_id")}})
            raise VerificationError("Request is invalid")
        logger.warning("IPN rejected: unknown response", extra={"extra": {"body": body[:200]}})
        raise VerificationError(f"Unknown response: {body}")

    def verify(
        self,
        raw_fields: Mapping[str, Any],
        remote_addr: str,
        sandbox: Optional[bool] = None,
    ) -> VerifiedPayment:
        """Authenticate one IPN message.

        Raises OriginError before any network call when ``remote_addr`` does not
        reverse-resolve to the notification host, and VerificationError when the
        echo-back fails or is not answered with VERIFIED.
        """
        use_sandbox = self.sandbox if sandbox is None else sandbox
        self._check_origin(self._resolver(remote_addr), remote_addr)

        url = self.endpoint(use_sandbox)
        try:
            with httpx.Client(**self._client_kwargs()) as client:
                resp = client.post(url, **self._request_kwargs(raw_fields))
                body = resp.text
        except httpx.HTTPError as e:
            logger.warning("IPN verification request to %s failed: %s", url, e)
            raise VerificationError("Verification request failed") from e

        return self._interpret(body, raw_fields, use_sandbox)

    async def averify(
        self,
        raw_fields: Mapping[str, Any],
        remote_addr: str,
        sandbox: Optional[bool] = None,
    ) -> VerifiedPayment:
        """Async counterpart of ``verify`` with the same outcomes."""
        use_sandbox = self.sandbox if sandbox is None else sandbox
        hostname = await asyncio.to_thread(self._resolver, remote_addr)
        self._check_origin(hostname, remote_addr)

        url = self.endpoint(use_sandbox)
        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                resp = await client.post(url, **self._request_kwargs(raw_fields))
                body = resp.text
        except httpx.HTTPError as e:
            logger.warning("IPN verification request to %s failed: %s", url, e)
            raise VerificationError("Verification request failed") from e

        return self._interpret(body, raw_fields, use_sandbox)


__all__ = ["NotificationVerifier", "build_validation_body", "reverse_lookup"]
