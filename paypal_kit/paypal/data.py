from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from paypal_kit.paypal.constants import MISSING, OPTION_NAME_PREFIX, OPTION_VALUE_PREFIX
from paypal_kit.utils.money import parse_amount


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return MISSING if value is None else str(value)


class VerifiedPayment:
    """Read-only view over the fields of a verified IPN message.

    Standard fields fall back to ``Decimal("0")`` / ``"null"`` when missing.
    Checkout options are rebuilt from ``option_nameN`` / ``option_valueN``
    pairs; a name without its value is ignored.
    """

    __slots__ = ("_raw", "_price", "_currency", "_custom", "_payer_email", "_custom_parameters")

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._raw: Mapping[str, Any] = MappingProxyType(dict(data))
        self._price: Decimal = parse_amount(data.get("mc_gross"))
        self._currency = _text(data, "mc_currency")
        self._custom = _text(data, "custom")
        self._payer_email = _text(data, "payer_email")

        params: Dict[str, str] = {}
        for key, value in data.items():
            name = str(key)
            if not name.startswith(OPTION_NAME_PREFIX):
                continue
            paired = data.get(name.replace(OPTION_NAME_PREFIX, OPTION_VALUE_PREFIX))
            if paired is not None:
                params[str(value)] = str(paired)
        self._custom_parameters: Mapping[str, str] = MappingProxyType(params)

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def custom(self) -> str:
        return self._custom

    @property
    def payer_email(self) -> str:
        return self._payer_email

    @property
    def custom_parameters(self) -> Mapping[str, str]:
        return self._custom_parameters

    @property
    def raw_data(self) -> Mapping[str, Any]:
        return self._raw

    def get_custom_parameter(self, key: str) -> Optional[str]:
        return self._custom_parameters.get(key)

    def __repr__(self) -> str:
        return f"VerifiedPayment(price={self._price!s}, currency={self._currency!r}, custom={self._custom!r})"


__all__ = ["VerifiedPayment"]
