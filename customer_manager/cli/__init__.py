"""
cli — command-line interface for customer-manager.

Entry points
────────────
  python -m customer_manager   (via customer_manager/__main__.py)
  customer-manager             (via pyproject.toml [project.scripts])

Subcommands: gui | list | search | insert | update | delete | reset
"""

from customer_manager.cli.main import (
    build_parser,
    cmd_delete,
    cmd_insert,
    cmd_list,
    cmd_reset,
    cmd_search,
    cmd_update,
    main,
)

__all__ = [
    "build_parser",
    "cmd_list",
    "cmd_search",
    "cmd_insert",
    "cmd_update",
    "cmd_delete",
    "cmd_reset",
    "main",
]
