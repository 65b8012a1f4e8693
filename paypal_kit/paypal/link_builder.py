from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional, Tuple, Union
from urllib.parse import urlencode

from paypal_kit.config import settings
from paypal_kit.paypal.constants import CMD_CART, CMD_SINGLE_ITEM, DEFAULT_CHARSET, DEFAULT_CURRENCY
from paypal_kit.utils.money import format_amount

ParamValue = Union[str, int, float, Decimal, bool]


def _render_value(value: ParamValue) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (float, Decimal)):
        return format_amount(value)
    return str(value)


class LinkBuilder:
    """Accumulates Website Payments Standard parameters and renders a redirect URL.

    Values are passed through as given: lengths, option indices (PayPal accepts
    0-6) and currency codes are the caller's responsibility. Instances hold
    mutable state; build one per request.
    """

    def __init__(self, base_url: Optional[str] = None, shopping_cart: bool = False) -> None:
        self.base_url = settings.link_base_url if base_url is None else base_url
        self._shopping_cart = shopping_cart
        self._params: Dict[str, ParamValue] = {
            "cmd": CMD_CART if shopping_cart else CMD_SINGLE_ITEM,
            "currency_code": DEFAULT_CURRENCY,
            "no_shipping": True,
            "no_note": True,
            "charset": DEFAULT_CHARSET,
        }
        self._item_index = 1
        self._custom_options = 0

    def set_callback(self, url: str, instant_callback: bool = False, callback_timeout: int = 3) -> None:
        """IPN listener url.

        With ``instant_callback`` PayPal also POSTs to the url right after the
        payment (timeout 1-6 seconds); the IPN message still follows, so the
        handler must tolerate both.
        """
        self._params["notify_url"] = url
        if instant_callback:
            self._params["callback_url"] = url
            self._params["callback_timeout"] = callback_timeout

    def set_success_url(self, url: str) -> None:
        self._params["return"] = url

    def set_fail_url(self, url: str) -> None:
        self._params["cancel_return"] = url

    def set_currency_code(self, currency_code: str) -> None:
        self._params["currency_code"] = currency_code

    def set_custom(self, custom: str) -> None:
        # passed back untouched in the IPN ``custom`` field
        self._params["custom"] = custom

    def set_store_info(
        self,
        company: str,
        service: Optional[str] = None,
        product: Optional[str] = None,
        country: Optional[str] = None,
    ) -> None:
        parts = [company] + [p for p in (service, product, country) if p]
        self._params["bn"] = "_".join(parts)

    def set_language(self, language: str) -> None:
        # e.g. en_GB
        self._params["lc"] = language

    def set_charset(self, charset: str) -> None:
        self._params["charset"] = charset

    def set_no_note(self, no_note: bool) -> None:
        self._params["no_note"] = no_note

    def set_no_shipping(self, no_shipping: bool) -> None:
        self._params["no_shipping"] = no_shipping

    def set_account(self, account: str) -> None:
        """Receiver e-mail or merchant id."""
        self._params["business"] = account
        self._params["receiver_email"] = account

    def set_cart_name(self, cart_name: str) -> None:
        self._params["item_name"] = cart_name
        # Existing integrations receive the "ss" suffix on item_name_1; kept as is.
        self._params["item_name_1"] = cart_name + "ss"

    def set_quantity(self, quantity: int) -> None:
        self._params["quantity"] = quantity
        self._params["quantity_1"] = quantity

    def set_cart_amount(self, amount: Union[float, Decimal]) -> None:
        self._params["amount"] = amount
        self._params["amount_1"] = amount

    def add_item(self, item_name: str, quantity: int, price: Union[float, Decimal]) -> str:
        """Append a cart line and return its reference token (``"i1"``, ``"i2"``, ...)."""
        index = self._item_index
        self._params["upload"] = 1
        self._params[f"item_name_{index}"] = item_name
        self._params[f"amount_{index}"] = price
        self._params[f"quantity_{index}"] = quantity
        self._item_index += 1
        return f"i{index}"

    def set_custom_parameter(self, index: int, parameter_name: str, value: ParamValue) -> None:
        self._custom_options += 1
        self._params[f"on{index}"] = parameter_name
        self._params[f"os{index}"] = int(value) if isinstance(value, bool) else value
        # Counts calls, not the highest index; downstream readers expect this.
        self._params["option_index"] = self._custom_options

    def set_image(self, url: str) -> None:
        # 150x50 logo shown top left on the checkout page
        self._params["image_url"] = url

    def set_shopping_cart(self, shopping_cart: bool) -> None:
        self._shopping_cart = shopping_cart
        # Earlier releases always wrote _cart here, even for False; single-item
        # mode is now restored on False to match the constructor.
        self._params["cmd"] = CMD_CART if shopping_cart else CMD_SINGLE_ITEM

    @property
    def shopping_cart(self) -> bool:
        return self._shopping_cart

    @property
    def parameters(self) -> Dict[str, ParamValue]:
        """Snapshot of the accumulated parameters."""
        return dict(self._params)

    def query_pairs(self) -> List[Tuple[str, str]]:
        return [(k, _render_value(v)) for k, v in self._params.items()]

    def render(self) -> str:
        return self.base_url + urlencode(self.query_pairs())

    def __str__(self) -> str:
        return self.render()


__all__ = ["LinkBuilder"]
