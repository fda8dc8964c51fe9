"""
Unit tests for customer_manager/validation.py

Coverage plan
─────────────
validate_customer → 6 tests (valid, trimming, id length, empty id,
                             missing fields, no format checks)
require_value     → 2 tests
─────────────────────────────────────────────────────────────────
Total             = 8 tests
"""

import pytest


class TestValidateCustomer:

    def test_valid_input_builds_customer(self):
        from customer_manager.validation import validate_customer
        c = validate_customer("100006", "Eve Park", "eve@smt.com", "0467890123")
        assert (c.id, c.name, c.email, c.mobile) == (
            "100006", "Eve Park", "eve@smt.com", "0467890123"
        )

    def test_fields_are_stripped(self):
        from customer_manager.validation import validate_customer
        c = validate_customer(" 100006 ", "  Eve ", " e ", " 1 ")
        assert (c.id, c.name, c.email, c.mobile) == ("100006", "Eve", "e", "1")

    @pytest.mark.parametrize("bad_id", ["12345", "1234567", ""])
    def test_wrong_id_length_is_rejected(self, bad_id):
        from customer_manager.exceptions import ValidationError
        from customer_manager.validation import MSG_ID_LENGTH, validate_customer
        with pytest.raises(ValidationError, match="6 digits"):
            validate_customer(bad_id, "Eve", "e@x", "1")
        assert MSG_ID_LENGTH == "ID must be exactly 6 digits (Primary Key)."

    def test_id_checked_before_other_fields(self):
        from customer_manager.exceptions import ValidationError
        from customer_manager.validation import MSG_ID_LENGTH, validate_customer
        with pytest.raises(ValidationError) as info:
            validate_customer("1", "", "", "")
        assert str(info.value) == MSG_ID_LENGTH

    @pytest.mark.parametrize("name,email,mobile", [
        ("", "e@x", "1"),
        ("Eve", "  ", "1"),
        ("Eve", "e@x", ""),
    ])
    def test_missing_field_is_rejected(self, name, email, mobile):
        from customer_manager.exceptions import ValidationError
        from customer_manager.validation import MSG_REQUIRED_FIELDS, validate_customer
        with pytest.raises(ValidationError) as info:
            validate_customer("100006", name, email, mobile)
        assert str(info.value) == MSG_REQUIRED_FIELDS

    def test_no_format_checks_on_id_email_or_mobile(self):
        from customer_manager.validation import validate_customer
        c = validate_customer("abcdef", "Eve", "not-an-email", "call me")
        assert c.id == "abcdef"


class TestRequireValue:

    def test_returns_stripped_value(self):
        from customer_manager.validation import require_value
        assert require_value("  John ", "msg") == "John"

    def test_empty_value_raises_with_message(self):
        from customer_manager.exceptions import ValidationError
        from customer_manager.validation import require_value
        with pytest.raises(ValidationError, match="Please enter"):
            require_value("   ", "Please enter a Name to search for.")
