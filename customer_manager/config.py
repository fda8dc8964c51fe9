"""Runtime configuration for customer-manager."""

import argparse
from dataclasses import dataclass

from customer_manager.store.db import SCHEMA_VERSION

__all__ = ["AppConfig", "DEFAULT_DB_PATH"]

DEFAULT_DB_PATH = "~/.customer-manager/smtbiz.db"


@dataclass
class AppConfig:
    """Settings shared by the CLI and the GUI."""
    db_path:        str  = DEFAULT_DB_PATH
    schema_version: int  = SCHEMA_VERSION
    debug:          bool = False

    @classmethod
    def from_args(cls, ns: argparse.Namespace) -> "AppConfig":
        """Build a config from a parsed CLI namespace (missing attrs keep defaults)."""
        return cls(
            db_path=getattr(ns, "db", None) or DEFAULT_DB_PATH,
            debug=bool(getattr(ns, "debug", False)),
        )
