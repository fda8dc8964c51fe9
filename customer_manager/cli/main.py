"""
CLI entry point for customer-manager.

Usage
─────
  # Open the form window
  customer-manager gui

  # Headless record management
  customer-manager list
  customer-manager search "John"
  customer-manager insert 100006 "Eve Park" eve@smt.com 0467890123
  customer-manager update 100006 "Eve Park" eve@park.com 0467890123
  customer-manager delete 100006
  customer-manager reset

  # Use another database file
  customer-manager --db ./local.db list

Subcommands are implemented as standalone functions (cmd_list, cmd_insert,
…) so they can be unit-tested without invoking argparse.  They raise
CustomerManagerError on rejected input or failed outcomes; main() turns
that into an "Error: …" line on stderr and exit code 1.
"""

import argparse
import logging
import sys
from typing import Optional

from customer_manager.config import DEFAULT_DB_PATH, AppConfig
from customer_manager.exceptions import CustomerManagerError
from customer_manager.gui.viewmodels import format_records
from customer_manager.store.db import CustomerStore
from customer_manager.store.models import SEED_CUSTOMERS
from customer_manager.validation import require_value, validate_customer

__all__ = [
    "build_parser",
    "cmd_gui",
    "cmd_list",
    "cmd_search",
    "cmd_insert",
    "cmd_update",
    "cmd_delete",
    "cmd_reset",
    "main",
]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: gui | list | search | insert | update | delete | reset
    """
    parser = argparse.ArgumentParser(
        prog="customer-manager",
        description="Single-screen customer record manager",
    )
    parser.add_argument(
        "--db",
        default=DEFAULT_DB_PATH,
        metavar="PATH",
        help=f"SQLite database path (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    sub.add_parser("gui", help="Open the customer form window")
    sub.add_parser("list", help="List all customers")

    srch = sub.add_parser("search", help="Find customers by partial name")
    srch.add_argument("name", metavar="NAME", help="Name fragment to match")

    for name, help_text in (("insert", "Add a new customer"),
                            ("update", "Change name/email/mobile of a customer")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("id", metavar="ID", help="6-digit customer id")
        p.add_argument("name", metavar="NAME")
        p.add_argument("email", metavar="EMAIL")
        p.add_argument("mobile", metavar="MOBILE")

    dele = sub.add_parser("delete", help="Delete a customer by id")
    dele.add_argument("id", metavar="ID", help="Customer id to delete")

    sub.add_parser("reset", help="Drop all customers and restore the sample records")

    return parser


# ── Command implementations ───────────────────────────────────────────────────


def cmd_gui(config: AppConfig) -> int:
    """Launch the PyQt6 window and block until it is closed."""
    from PyQt6.QtWidgets import QApplication
    from customer_manager.gui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv)
    win = MainWindow(config=config)
    win.show()
    return app.exec()


def cmd_list(store: CustomerStore) -> None:
    """Print every customer to stdout."""
    customers = store.list_all()
    if not customers:
        print("No customers found in the database.")
        return
    print(format_records(f"--- ALL CUSTOMER RECORDS ({len(customers)}) ---", customers), end="")


def cmd_search(store: CustomerStore, name: str) -> int:
    """Print customers whose name contains *name*; returns the match count."""
    query = require_value(name, "Please enter a Name to search for.")
    results = store.search_by_name(query)
    if not results:
        print(f"No customers matched '{query}'.")
        return 0
    print(format_records(f"--- SEARCH RESULTS for '{query}' ({len(results)}) ---", results), end="")
    return len(results)


def cmd_insert(store: CustomerStore, customer_id: str, name: str, email: str, mobile: str) -> int:
    """Insert a customer; returns the internal row id."""
    customer = validate_customer(customer_id, name, email, mobile)
    outcome = store.insert(customer)
    if not outcome:
        raise CustomerManagerError(
            f"Could not insert customer {customer.id}. ID might already exist."
        )
    print(f"Customer ID {customer.id} inserted.")
    return outcome.row_id


def cmd_update(store: CustomerStore, customer_id: str, name: str, email: str, mobile: str) -> None:
    customer = validate_customer(customer_id, name, email, mobile)
    if store.update(customer) == 0:
        raise CustomerManagerError(f"Update failed. Customer ID {customer.id} not found.")
    print(f"Customer ID {customer.id} updated.")


def cmd_delete(store: CustomerStore, customer_id: str) -> None:
    customer_id = require_value(customer_id, "Please enter the ID of the customer to delete.")
    if store.delete(customer_id) == 0:
        raise CustomerManagerError(f"Delete failed. Customer ID {customer_id} not found.")
    print(f"Customer ID {customer_id} deleted.")


def cmd_reset(store: CustomerStore) -> None:
    if not store.reset():
        raise CustomerManagerError("Failed to reset the database.")
    print(f"Database table reset and {len(SEED_CUSTOMERS)} sample records inserted.")


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)
    config = AppConfig.from_args(ns)

    level = logging.DEBUG if config.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    try:
        if ns.subcommand == "gui":
            return cmd_gui(config)

        store = CustomerStore(config.db_path, schema_version=config.schema_version)

        if ns.subcommand == "list":
            cmd_list(store)
        elif ns.subcommand == "search":
            cmd_search(store, ns.name)
        elif ns.subcommand == "insert":
            cmd_insert(store, ns.id, ns.name, ns.email, ns.mobile)
        elif ns.subcommand == "update":
            cmd_update(store, ns.id, ns.name, ns.email, ns.mobile)
        elif ns.subcommand == "delete":
            cmd_delete(store, ns.id)
        elif ns.subcommand == "reset":
            cmd_reset(store)
    except CustomerManagerError as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
