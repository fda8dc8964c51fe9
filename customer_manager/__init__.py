"""customer-manager — single-screen customer record manager backed by SQLite."""

__version__ = "1.0.0"
