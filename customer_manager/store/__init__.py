"""
store — SQLite-backed persistence layer for customer records.

Public API
──────────
Customer        — dataclass representing one customer row
InsertOutcome   — result of CustomerStore.insert()
CustomerStore   — CRUD interface (insert, update, delete, search_by_name, …)
SEED_CUSTOMERS  — the five records restored by reset()
"""

from customer_manager.store.models import SEED_CUSTOMERS, Customer, InsertOutcome
from customer_manager.store.db import SCHEMA_VERSION, CustomerStore

__all__ = ["Customer", "InsertOutcome", "CustomerStore", "SEED_CUSTOMERS", "SCHEMA_VERSION"]
