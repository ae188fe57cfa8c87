"""
Main View-Model
===============
Presentation state for the customer window.

Why is this file needed?
------------------------
1. State: It owns the customer list shown by the view, the current
   selection and the active search filter.
2. Commands: Add / Remove / Save / Search are exposed as RelayCommands the
   view binds its buttons to.
3. Notifications: Views never poll; they listen to `property_changed` and the
   Qt model signals of `customers`.

Classes:
    MainViewModel: The view-model the main window binds to.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal

from customerapp.model.customer import Customer
from customerapp.model.repository import CustomerRepository
from customerapp.viewmodel.collection import CustomerFilterModel, CustomerListModel, country_contains
from customerapp.viewmodel.command import RelayCommand

logger = logging.getLogger(__name__)


class MainViewModel(QObject):
    """Customer list, selection and commands, with signals for view sync."""
    CUSTOMERS = "Customers"
    SELECTED_CUSTOMER = "SelectedCustomer"

    property_changed = Signal(str)
    selected_customer_changed = Signal(object)

    def __init__(self, customer_repository: Optional[CustomerRepository], parent: Optional[QObject] = None) -> None:
        if customer_repository is None:
            raise ValueError("customer_repository must not be None")
        super().__init__(parent)

        self._repository = customer_repository
        # Re-entrant: observers may read state back during a notification
        self._lock = threading.RLock()

        self._customers = CustomerListModel(self._repository.list(), parent=self)
        self._customers_view = CustomerFilterModel(self._customers, parent=self)
        self._selected_customer: Optional[Customer] = None

        self.add_command = RelayCommand(self._add, parent=self)
        self.remove_command = RelayCommand(
            self._remove, lambda: self._selected_customer is not None, parent=self
        )
        self.save_command = RelayCommand(self._save, parent=self)
        self.search_command = RelayCommand(self._search, accepts_parameter=True, parent=self)

        logger.debug(f"MainViewModel created with {len(self._customers)} customers.")

    # --- Properties ---------------------------------------------------------
    @property
    def customers(self) -> CustomerListModel:
        return self._customers

    @property
    def customers_view(self) -> CustomerFilterModel:
        """Default (filterable) view of `customers`."""
        return self._customers_view

    @property
    def selected_customer(self) -> Optional[Customer]:
        return self._selected_customer

    @selected_customer.setter
    def selected_customer(self, customer: Optional[Customer]) -> None:
        with self._lock:
            if customer is not None and customer not in self._customers:
                raise ValueError("selected_customer must be one of the listed customers or None")
            self._set_selected(customer)

    def _set_selected(self, customer: Optional[Customer]) -> None:
        if customer is self._selected_customer:
            return
        self._selected_customer = customer
        self.selected_customer_changed.emit(customer)
        self.property_changed.emit(self.SELECTED_CUSTOMER)
        self.remove_command.raise_can_execute_changed()

    # --- Commands -----------------------------------------------------------
    def _add(self) -> None:
        with self._lock:
            customer = Customer()
            if not self._repository.add(customer):
                logger.debug("Repository rejected the new customer; nothing changed.")
                return

            self._customers.append(customer)
            self._set_selected(customer)
            logger.info("Customer added.")
            self.property_changed.emit(self.CUSTOMERS)

    def _remove(self) -> None:
        with self._lock:
            customer = self._selected_customer
            if customer is None:
                return

            self._repository.remove(customer)
            self._customers.remove(customer)
            self._set_selected(None)
            logger.info(f"Customer removed: {customer.display_name}")
            self.property_changed.emit(self.CUSTOMERS)

    def _save(self) -> None:
        with self._lock:
            logger.info("Committing customer changes.")
            self._repository.commit()

    def _search(self, text: Optional[str]) -> None:
        with self._lock:
            if not text or not text.strip():
                self._customers_view.filter = None
                logger.debug("Search filter cleared.")
            else:
                self._customers_view.filter = country_contains(text)
                logger.debug(f"Search filter set: country contains '{text}'.")
