"""
Unit tests for customer_manager/gui/viewmodels.py — no Qt dependency.

Coverage plan
─────────────
format_records          → 1 test
CustomerFormViewModel   → 16 tests (insert, update, delete, search,
                                    show_all, reset, validation gate)
─────────────────────────────────────────────────────────────────
Total                   = 17 tests
"""

from unittest.mock import MagicMock

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures / helpers
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def store(tmp_path):
    from customer_manager.store.db import CustomerStore
    return CustomerStore(db_path=str(tmp_path / "vm.db"))


@pytest.fixture
def vm(store):
    from customer_manager.gui.viewmodels import CustomerFormViewModel
    return CustomerFormViewModel(store)


def _fill(vm, customer_id="100006", name="Eve Park", email="eve@smt.com", mobile="0467890123"):
    vm.customer_id = customer_id
    vm.name = name
    vm.email = email
    vm.mobile = mobile


# ─────────────────────────────────────────────────────────────────────────────
# 1. format_records
# ─────────────────────────────────────────────────────────────────────────────

def test_format_records_has_header_and_blocks():
    from customer_manager.gui.viewmodels import format_records
    from customer_manager.store.models import SEED_CUSTOMERS
    text = format_records("HEADER", list(SEED_CUSTOMERS[:2]))
    assert text.startswith("HEADER\n")
    assert "ID: 100001" in text and "ID: 100002" in text


# ─────────────────────────────────────────────────────────────────────────────
# 2. CustomerFormViewModel
# ─────────────────────────────────────────────────────────────────────────────

class TestInsertAction:

    def test_insert_success_keeps_id_and_refreshes(self, vm):
        _fill(vm)
        assert vm.insert() is True
        assert vm.message == "Customer ID 100006 Inserted Successfully!"
        assert vm.customer_id == "100006"
        assert vm.name == vm.email == vm.mobile == ""
        assert "--- ALL CUSTOMER RECORDS (6) ---" in vm.results_text

    def test_insert_duplicate_reports_error(self, vm):
        _fill(vm, customer_id="100001")
        assert vm.insert() is False
        assert vm.message.startswith("Error: Could not insert customer")

    def test_insert_invalid_id_never_reaches_store(self):
        from customer_manager.gui.viewmodels import CustomerFormViewModel
        store = MagicMock()
        vm = CustomerFormViewModel(store)
        _fill(vm, customer_id="123")
        assert vm.insert() is False
        assert vm.message == "ID must be exactly 6 digits (Primary Key)."
        store.insert.assert_not_called()
        assert vm.name == "Eve Park"  # form untouched

    def test_insert_missing_fields_never_reaches_store(self):
        from customer_manager.gui.viewmodels import CustomerFormViewModel
        store = MagicMock()
        vm = CustomerFormViewModel(store)
        _fill(vm, email="")
        assert vm.insert() is False
        assert vm.message == "All customer fields must be filled for Insert/Update."
        store.insert.assert_not_called()


class TestUpdateAction:

    def test_update_success_clears_all_fields(self, vm, store):
        _fill(vm, customer_id="100002", name="Alice Jones")
        assert vm.update() is True
        assert vm.message == "Customer ID 100002 Updated Successfully (Rows: 1)!"
        assert vm.customer_id == ""
        assert store.search_by_name("Alice")[0].name == "Alice Jones"

    def test_update_unknown_id_reports_not_found(self, vm):
        _fill(vm, customer_id="999999")
        assert vm.update() is False
        assert vm.message == "Error: Update failed. Customer ID not found."

    def test_update_invalid_never_reaches_store(self):
        from customer_manager.gui.viewmodels import CustomerFormViewModel
        store = MagicMock()
        vm = CustomerFormViewModel(store)
        _fill(vm, customer_id="")
        assert vm.update() is False
        store.update.assert_not_called()


class TestDeleteAction:

    def test_delete_existing(self, vm):
        vm.customer_id = "100005"
        assert vm.delete() is True
        assert vm.message == "Customer ID 100005 Deleted Successfully!"
        assert "100005" not in vm.results_text

    def test_delete_missing_id_reports_not_found(self, vm):
        vm.customer_id = "999999"
        assert vm.delete() is False
        assert vm.message == "Error: Delete failed. Customer ID not found."

    def test_delete_without_id_prompts(self, vm):
        assert vm.delete() is False
        assert vm.message == "Please enter the ID of the customer to delete."


class TestSearchAction:

    def test_search_hit_renders_results(self, vm):
        vm.name = "john"
        assert vm.search() is True
        assert vm.message == "1 customer(s) found."
        assert vm.results_text.startswith("--- SEARCH RESULTS for 'john' (1) ---")
        assert "John Citizen" in vm.results_text

    def test_search_miss_shows_friendly_text(self, vm):
        vm.name = "zzz"
        assert vm.search() is False
        assert vm.results_text == "No customers matched 'zzz'. Please try a different name."
        assert vm.message == "Customer 'zzz' not found."

    def test_search_without_name_prompts(self, vm):
        assert vm.search() is False
        assert vm.message == "Please enter a Name to search for."


class TestShowAllAndReset:

    def test_show_all_lists_seed(self, vm):
        assert vm.show_all() is True
        assert vm.results_text.startswith("--- ALL CUSTOMER RECORDS (5) ---")

    def test_show_all_empty_store(self, vm, store):
        for c in store.list_all():
            store.delete(c.id)
        vm.show_all()
        assert vm.results_text == "No customers found in the database."

    def test_reset_success_and_failure(self, vm):
        _fill(vm)
        assert vm.reset() is True
        assert vm.message == "Database table reset and 5 sample records inserted."
        assert vm.customer_id == ""

        from customer_manager.gui.viewmodels import CustomerFormViewModel
        failing = MagicMock()
        failing.reset.return_value = False
        vm2 = CustomerFormViewModel(failing)
        assert vm2.reset() is False
        assert vm2.message == "ERROR: Failed to reset the database."
