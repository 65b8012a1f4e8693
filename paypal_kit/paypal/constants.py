from __future__ import annotations

# Provider-defined strings; must stay byte-exact.
IPN_DOMAIN = "notify.paypal.com"
IPN_URL = "https://ipnpb.paypal.com/cgi-bin/webscr"
IPN_URL_SANDBOX = "https://ipnpb.sandbox.paypal.com/cgi-bin/webscr"

RESPONSE_VERIFIED = "VERIFIED"
RESPONSE_INVALID = "INVALID"

VALIDATE_CMD = "_notify-validate"

CMD_SINGLE_ITEM = "_xclick"
CMD_CART = "_cart"

DEFAULT_LINK_BASE_URL = "https://www.paypal.com/cgi-bin/webscr?"
DEFAULT_CURRENCY = "USD"
DEFAULT_CHARSET = "utf-8"

OPTION_NAME_PREFIX = "option_name"
OPTION_VALUE_PREFIX = "option_value"

# Returned by VerifiedPayment accessors when a field is missing.
MISSING = "null"
