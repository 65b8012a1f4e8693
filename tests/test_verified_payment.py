from __future__ import annotations

from decimal import Decimal

import pytest

from paypal_kit.paypal.data import VerifiedPayment


def test_standard_fields_are_exposed() -> None:
    p = VerifiedPayment(
        {
            "mc_gross": "19.95",
            "mc_currency": "EUR",
            "custom": "user:42",
            "payer_email": "buyer@example.com",
        }
    )
    assert p.price == Decimal("19.95")
    assert p.currency == "EUR"
    assert p.custom == "user:42"
    assert p.payer_email == "buyer@example.com"


def test_defaults_when_fields_missing() -> None:
    p = VerifiedPayment({})
    assert p.price == 0
    assert p.currency == "null"
    assert p.custom == "null"
    assert p.payer_email == "null"
    assert dict(p.custom_parameters) == {}


def test_unparseable_gross_falls_back_to_zero() -> None:
    p = VerifiedPayment({"mc_gross": "n/a"})
    assert p.price == Decimal("0")


def test_none_values_count_as_missing() -> None:
    p = VerifiedPayment({"mc_currency": None, "mc_gross": None})
    assert p.currency == "null"
    assert p.price == 0


def test_option_pairs_are_rebuilt() -> None:
    p = VerifiedPayment(
        {
            "option_name0": "color",
            "option_value0": "red",
            "option_name1": "size",
            "option_value1": "XL",
        }
    )
    assert p.get_custom_parameter("color") == "red"
    assert p.get_custom_parameter("size") == "XL"
    assert dict(p.custom_parameters) == {"color": "red", "size": "XL"}


def test_option_without_value_is_skipped() -> None:
    p = VerifiedPayment({"option_name0": "color"})
    assert p.get_custom_parameter("color") is None


def test_unknown_custom_parameter_is_none() -> None:
    p = VerifiedPayment({"option_name0": "color", "option_value0": "red"})
    assert p.get_custom_parameter("shape") is None


def test_raw_data_is_untouched_and_read_only() -> None:
    fields = {"mc_gross": "1.00", "txn_id": "ABC123", "option_name0": "k", "option_value0": "v"}
    p = VerifiedPayment(fields)
    assert dict(p.raw_data) == fields
    with pytest.raises(TypeError):
        p.raw_data["txn_id"] = "other"  # type: ignore[index]
    # later changes to the caller's mapping do not leak in
    fields["txn_id"] = "changed"
    assert p.raw_data["txn_id"] == "ABC123"


def test_accessors_are_read_only() -> None:
    p = VerifiedPayment({"mc_currency": "USD"})
    with pytest.raises(AttributeError):
        p.currency = "EUR"  # type: ignore[misc]


def test_non_string_keys_do_not_break_construction() -> None:
    p = VerifiedPayment({1: "a", "mc_gross": "2", "option_name0": "color", "option_value0": "red"})  # type: ignore[dict-item]
    assert p.price == Decimal("2")
    assert p.get_custom_parameter("color") == "red"
