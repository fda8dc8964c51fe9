"""
CustomerFormPage — the single screen of the customer manager GUI.

The user types into the four fields and presses one of the action buttons;
the results area shows the affected records and a status message is
emitted for the window's status bar.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ ID:     [______]                        │
  │ Name:   [_______________________________]│
  │ Email:  [_______________________________]│
  │ Mobile: [_______________________________]│
  │ [Insert] [Update] [Delete] [Search]     │
  │ [Show All] [Reset]                      │
  │ ┌──────────────────────────────────────┐│
  │ │ --- ALL CUSTOMER RECORDS (5) ---     ││
  │ │ ID: 100001 …                         ││
  │ └──────────────────────────────────────┘│
  └─────────────────────────────────────────┘
"""

import logging
from typing import Callable

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from customer_manager.gui.viewmodels import CustomerFormViewModel
from customer_manager.validation import ID_LENGTH

__all__ = ["CustomerFormPage"]

logger = logging.getLogger(__name__)


class CustomerFormPage(QWidget):
    """Form + action buttons + results area, driven by CustomerFormViewModel."""

    message_posted = pyqtSignal(str)  # status text after each action

    def __init__(self, vm: CustomerFormViewModel, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self._build_ui()
        self._connect_actions()
        self._vm.refresh()
        self._sync_from_vm()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        layout.addWidget(QLabel("<b>Customer Management</b>"))

        form = QFormLayout()
        self._id_edit = QLineEdit()
        self._id_edit.setMaxLength(ID_LENGTH)
        self._id_edit.setPlaceholderText("6-digit ID")
        self._name_edit   = QLineEdit()
        self._email_edit  = QLineEdit()
        self._mobile_edit = QLineEdit()
        form.addRow("ID:",     self._id_edit)
        form.addRow("Name:",   self._name_edit)
        form.addRow("Email:",  self._email_edit)
        form.addRow("Mobile:", self._mobile_edit)
        layout.addLayout(form)

        crud_row = QHBoxLayout()
        self._insert_btn = QPushButton("Insert")
        self._update_btn = QPushButton("Update")
        self._delete_btn = QPushButton("Delete")
        self._search_btn = QPushButton("Search")
        for btn in (self._insert_btn, self._update_btn, self._delete_btn, self._search_btn):
            crud_row.addWidget(btn)
        layout.addLayout(crud_row)

        list_row = QHBoxLayout()
        self._show_all_btn = QPushButton("Show All")
        self._reset_btn    = QPushButton("Reset")
        list_row.addWidget(self._show_all_btn)
        list_row.addWidget(self._reset_btn)
        layout.addLayout(list_row)

        self._results = QPlainTextEdit()
        self._results.setReadOnly(True)
        layout.addWidget(self._results)

    def _connect_actions(self) -> None:
        self._insert_btn.clicked.connect(lambda: self._run(self._vm.insert))
        self._update_btn.clicked.connect(lambda: self._run(self._vm.update))
        self._delete_btn.clicked.connect(lambda: self._run(self._vm.delete))
        self._search_btn.clicked.connect(lambda: self._run(self._vm.search))
        self._show_all_btn.clicked.connect(lambda: self._run(self._vm.show_all))
        self._reset_btn.clicked.connect(lambda: self._run(self._vm.reset))

    # ── ViewModel sync ─────────────────────────────────────────────────────

    def _sync_to_vm(self) -> None:
        self._vm.customer_id = self._id_edit.text()
        self._vm.name        = self._name_edit.text()
        self._vm.email       = self._email_edit.text()
        self._vm.mobile      = self._mobile_edit.text()

    def _sync_from_vm(self) -> None:
        self._id_edit.setText(self._vm.customer_id)
        self._name_edit.setText(self._vm.name)
        self._email_edit.setText(self._vm.email)
        self._mobile_edit.setText(self._vm.mobile)
        self._results.setPlainText(self._vm.results_text)

    def _run(self, action: Callable[[], bool]) -> None:
        self._sync_to_vm()
        self._vm.message = None
        ok = action()
        logger.debug("%s -> %s", action.__name__, ok)
        self._sync_from_vm()
        if self._vm.message:
            self.message_posted.emit(self._vm.message)

    # ── Public API ─────────────────────────────────────────────────────────

    @property
    def results_text(self) -> str:
        return self._results.toPlainText()
