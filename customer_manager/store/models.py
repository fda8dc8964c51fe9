"""Data models for the store module."""

from dataclasses import dataclass
from typing import Optional

__all__ = ["Customer", "InsertOutcome", "SEED_CUSTOMERS"]


@dataclass
class Customer:
    """
    One row of the customer table.

    Fields
    ──────
    id      — 6-character business key (primary key, never updated)
    name    — display name, matched by search_by_name()
    email   — free text, not format-checked
    mobile  — free text, not format-checked
    """
    id:     str
    name:   str
    email:  str
    mobile: str

    def __str__(self) -> str:
        return (
            f"ID: {self.id}\nName: {self.name}\nEmail: {self.email}\n"
            f"Mobile: {self.mobile}\n" + "-" * 40
        )


@dataclass(frozen=True)
class InsertOutcome:
    """
    Result of CustomerStore.insert().

    row_id is SQLite's internal rowid, not the customer id; it is None
    when the insert was rejected.
    """
    success: bool
    row_id:  Optional[int] = None

    def __bool__(self) -> bool:
        return self.success


# Canonical "factory reset" contents, in storage order
SEED_CUSTOMERS: tuple[Customer, ...] = (
    Customer("100001", "John Citizen", "john@smt.com",  "0412345678"),
    Customer("100002", "Alice Smith",  "alice@smt.com", "0423456789"),
    Customer("100003", "Bob Johnson",  "bob@smt.com",   "0434567890"),
    Customer("100004", "Clara Lee",    "clara@smt.com", "0445678901"),
    Customer("100005", "David Chen",   "david@smt.com", "0456789012"),
)
