"""
MainWindow — top-level application window for the customer manager GUI.

Hosts the single CustomerFormPage as its central widget and shows each
action's status message in the status bar.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget

from customer_manager.config import AppConfig
from customer_manager.gui.customer_form import CustomerFormPage
from customer_manager.gui.viewmodels import CustomerFormViewModel
from customer_manager.store.db import CustomerStore

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Root window: owns the store and wires page messages to the status bar."""

    def __init__(
        self,
        store: Optional[CustomerStore] = None,
        config: Optional[AppConfig] = None,
        parent: QWidget = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Customer Management")
        self.resize(520, 640)

        if store is None:
            config = config or AppConfig()
            store = CustomerStore(config.db_path, schema_version=config.schema_version)
        self._store = store
        logger.info("Using customer store at %s", store.db_path)

        self._page = CustomerFormPage(CustomerFormViewModel(self._store))
        self._page.message_posted.connect(self._show_message)
        self.setCentralWidget(self._page)

    def _show_message(self, text: str) -> None:
        self.statusBar().showMessage(text, STATUS_TIMEOUT_MS)
