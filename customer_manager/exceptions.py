"""
Project-wide custom exception hierarchy.
All modules raise subclasses of CustomerManagerError — never bare Exception.
"""

__all__ = [
    "CustomerManagerError",
    "ValidationError",
    "StoreError",
]


class CustomerManagerError(Exception):
    """Root exception for all customer-manager errors."""


# ── Validation ────────────────────────────────────────────────────────────────

class ValidationError(CustomerManagerError):
    """Raised when form input is rejected before any store access."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(CustomerManagerError):
    """Raised when the SQLite store cannot be opened or its schema prepared."""
