"""
GUI ViewModels — pure-Python state containers.

No Qt imports here; every class is testable without a display.
The Qt page copies state out of these objects after each action.

Public API
──────────
format_records          — render a list of customers under a header line
CustomerFormViewModel   — form fields + results text + last message,
                          with one method per button on the screen
"""

import logging
from typing import Optional

from customer_manager.exceptions import ValidationError
from customer_manager.store.db import CustomerStore
from customer_manager.store.models import SEED_CUSTOMERS, Customer
from customer_manager.validation import require_value, validate_customer

__all__ = ["format_records", "CustomerFormViewModel"]

logger = logging.getLogger(__name__)

MSG_DELETE_NEEDS_ID   = "Please enter the ID of the customer to delete."
MSG_SEARCH_NEEDS_NAME = "Please enter a Name to search for."
MSG_EMPTY_STORE       = "No customers found in the database."


def format_records(header: str, customers: list[Customer]) -> str:
    """Return *header* followed by one block per customer."""
    lines = [header]
    lines.extend(str(c) for c in customers)
    return "\n".join(lines) + "\n"


class CustomerFormViewModel:
    """
    Backs the single customer form screen.

    Attributes
    ──────────
    customer_id, name, email, mobile — current form field values
    results_text — text shown in the results area
    message      — last status message (shown in the status bar)
    """

    def __init__(self, store: CustomerStore) -> None:
        self._store = store
        self.customer_id:  str           = ""
        self.name:         str           = ""
        self.email:        str           = ""
        self.mobile:       str           = ""
        self.results_text: str           = ""
        self.message:      Optional[str] = None

    # ── Helpers ───────────────────────────────────────────────────────────

    def clear_fields(self, clear_id: bool) -> None:
        """Blank the form; the id field is kept unless *clear_id*."""
        if clear_id:
            self.customer_id = ""
        self.name = ""
        self.email = ""
        self.mobile = ""

    def refresh(self) -> None:
        """Render every stored customer into results_text."""
        customers = self._store.list_all()
        if not customers:
            self.results_text = MSG_EMPTY_STORE
        else:
            self.results_text = format_records(
                f"--- ALL CUSTOMER RECORDS ({len(customers)}) ---", customers
            )
        logger.info("Displaying %d records.", len(customers))

    def _candidate(self) -> Optional[Customer]:
        try:
            return validate_customer(self.customer_id, self.name, self.email, self.mobile)
        except ValidationError as exc:
            self.message = str(exc)
            return None

    # ── Actions (one per button) ──────────────────────────────────────────

    def insert(self) -> bool:
        customer = self._candidate()
        if customer is None:
            return False
        outcome = self._store.insert(customer)
        if outcome:
            self.message = f"Customer ID {customer.id} Inserted Successfully!"
        else:
            self.message = "Error: Could not insert customer. ID might already exist."
        self.clear_fields(clear_id=False)
        self.refresh()
        return outcome.success

    def update(self) -> bool:
        customer = self._candidate()
        if customer is None:
            return False
        rows = self._store.update(customer)
        if rows > 0:
            self.message = f"Customer ID {customer.id} Updated Successfully (Rows: {rows})!"
        else:
            self.message = "Error: Update failed. Customer ID not found."
        self.clear_fields(clear_id=True)
        self.refresh()
        return rows > 0

    def delete(self) -> bool:
        try:
            customer_id = require_value(self.customer_id, MSG_DELETE_NEEDS_ID)
        except ValidationError as exc:
            self.message = str(exc)
            return False
        rows = self._store.delete(customer_id)
        if rows > 0:
            self.message = f"Customer ID {customer_id} Deleted Successfully!"
        else:
            self.message = "Error: Delete failed. Customer ID not found."
        self.clear_fields(clear_id=True)
        self.refresh()
        return rows > 0

    def search(self) -> bool:
        try:
            query = require_value(self.name, MSG_SEARCH_NEEDS_NAME)
        except ValidationError as exc:
            self.message = str(exc)
            return False
        results = self._store.search_by_name(query)
        if results:
            self.results_text = format_records(
                f"--- SEARCH RESULTS for '{query}' ({len(results)}) ---", results
            )
            self.message = f"{len(results)} customer(s) found."
            return True
        self.results_text = f"No customers matched '{query}'. Please try a different name."
        self.message = f"Customer '{query}' not found."
        return False

    def show_all(self) -> bool:
        self.refresh()
        self.message = "All records retrieved and displayed."
        return True

    def reset(self) -> bool:
        if not self._store.reset():
            self.message = "ERROR: Failed to reset the database."
            return False
        self.message = (
            f"Database table reset and {len(SEED_CUSTOMERS)} sample records inserted."
        )
        self.clear_fields(clear_id=True)
        self.refresh()
        return True
