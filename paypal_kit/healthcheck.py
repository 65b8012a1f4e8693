import asyncio
import sys

import httpx
from dotenv import load_dotenv

from paypal_kit.config import Settings
from paypal_kit.paypal.constants import IPN_URL, IPN_URL_SANDBOX, RESPONSE_INVALID, RESPONSE_VERIFIED, VALIDATE_CMD

# Healthcheck: validate settings and, unless HEALTHCHECK_SKIP_PAYPAL=1, confirm the
# IPN verification endpoint answers. An empty validate request is expected to come
# back INVALID; any token at all proves TLS and routing work.


def _check_settings(cfg: Settings) -> list[str]:
    problems: list[str] = []
    if cfg.verify_timeout <= 0:
        problems.append("PAYPAL_VERIFY_TIMEOUT must be positive")
    if not cfg.ipn_domain:
        problems.append("PAYPAL_IPN_DOMAIN is empty")
    if not cfg.link_base_url.startswith("https://"):
        problems.append("PAYPAL_LINK_BASE_URL must be https")
    return problems


async def _check_paypal(cfg: Settings) -> bool:
    url = IPN_URL_SANDBOX if cfg.paypal_sandbox else IPN_URL
    try:
        timeout = httpx.Timeout(cfg.verify_timeout, connect=6.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.post(
                url,
                content=f"cmd={VALIDATE_CMD}".encode(),
                headers={"Content-Type": "application/x-www-form-urlencoded", "Connection": "close"},
            )
            return resp.text in {RESPONSE_INVALID, RESPONSE_VERIFIED}
    except httpx.HTTPError:
        return False


def main() -> int:
    load_dotenv()
    cfg = Settings()

    problems = _check_settings(cfg)
    if problems:
        for p in problems:
            print(p, file=sys.stderr)
        return 1

    if not cfg.healthcheck_skip_paypal:
        if not asyncio.run(_check_paypal(cfg)):
            print("paypal verification endpoint not reachable", file=sys.stderr)
            return 1

    print("ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
