"""
Pre-write validation for customer form input.

Checks performed (in order):
  1. id_length   — id is non-empty and exactly ID_LENGTH characters
  2. required    — name, email and mobile are all non-empty

No format checks are made on email or mobile, and the id is not checked
for digits; uniqueness is left to the store's primary key.
"""

import logging

from customer_manager.exceptions import ValidationError
from customer_manager.store.models import Customer

__all__ = [
    "ID_LENGTH",
    "MSG_ID_LENGTH",
    "MSG_REQUIRED_FIELDS",
    "validate_customer",
    "require_value",
]

logger = logging.getLogger(__name__)

ID_LENGTH = 6

MSG_ID_LENGTH       = "ID must be exactly 6 digits (Primary Key)."
MSG_REQUIRED_FIELDS = "All customer fields must be filled for Insert/Update."


def validate_customer(customer_id: str, name: str, email: str, mobile: str) -> Customer:
    """
    Build a Customer from raw form values, or raise ValidationError.

    Surrounding whitespace is stripped from every field before checking.
    """
    customer_id = (customer_id or "").strip()
    name        = (name or "").strip()
    email       = (email or "").strip()
    mobile      = (mobile or "").strip()

    if len(customer_id) != ID_LENGTH:
        logger.debug("Rejected id %r: length %d", customer_id, len(customer_id))
        raise ValidationError(MSG_ID_LENGTH)

    if not (name and email and mobile):
        logger.debug("Rejected id %s: missing fields", customer_id)
        raise ValidationError(MSG_REQUIRED_FIELDS)

    return Customer(id=customer_id, name=name, email=email, mobile=mobile)


def require_value(value: str, message: str) -> str:
    """Return *value* stripped; raise ValidationError(message) if it is empty."""
    value = (value or "").strip()
    if not value:
        raise ValidationError(message)
    return value
