"""
gui — PyQt6 front-end for the customer manager.

Modules
───────
main_window    — MainWindow, the top-level application window
customer_form  — CustomerFormPage, the single form screen
viewmodels     — pure-Python state containers (importable without Qt)

MainWindow is not imported here so that viewmodels can be used and
tested on machines without PyQt6.
"""
