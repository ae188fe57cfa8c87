"""
Observable Customer Collection
==============================
Qt models that hold the customer list for the view.

Classes:
    CustomerListModel: The ordered, observable list of customers.
    CustomerFilterModel: The default view over that list, with an optional
        predicate deciding which rows are visible.
"""
from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional

from PySide6.QtCore import (
    QAbstractListModel, QByteArray, QModelIndex, QObject, QSortFilterProxyModel, Qt, Signal
)

from customerapp.model.customer import Customer

CustomerPredicate = Callable[[Customer], bool]

# Role used to read the Customer object itself out of the model
CUSTOMER_ROLE = int(Qt.ItemDataRole.UserRole) + 1


def country_contains(term: str) -> CustomerPredicate:
    """Predicate matching customers whose country contains `term`, ignoring case."""
    needle = term.lower()

    def _matches(customer: Customer) -> bool:
        return needle in (customer.country or "").lower()

    return _matches


class CustomerListModel(QAbstractListModel):
    """
    Ordered list of customers exposed to Qt views.

    Only the owning view-model mutates it (append/remove); everyone else reads
    it through the Qt model API or the sequence protocol.
    """

    def __init__(self, customers: Iterable[Customer] = (), parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._customers: List[Customer] = list(customers)

    # --- Qt model API -------------------------------------------------------
    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._customers)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or not 0 <= index.row() < len(self._customers):
            return None

        customer = self._customers[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return customer.display_name
        if role == CUSTOMER_ROLE:
            return customer
        return None

    def roleNames(self) -> dict:
        roles = super().roleNames()
        roles[CUSTOMER_ROLE] = QByteArray(b"customer")
        return roles

    # --- Sequence protocol --------------------------------------------------
    def __len__(self) -> int:
        return len(self._customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(list(self._customers))

    def __getitem__(self, row: int) -> Customer:
        return self._customers[row]

    def __contains__(self, customer: object) -> bool:
        return any(c is customer for c in self._customers)

    def __bool__(self) -> bool:
        # A model object is always truthy, even when it holds no rows
        return True

    def row_of(self, customer: Customer) -> int:
        """Row of `customer`, or -1 if it is not in the list."""
        for row, c in enumerate(self._customers):
            if c is customer:
                return row
        return -1

    # --- Mutation (owner only) ----------------------------------------------
    def append(self, customer: Customer) -> None:
        row = len(self._customers)
        self.beginInsertRows(QModelIndex(), row, row)
        self._customers.append(customer)
        self.endInsertRows()

    def remove(self, customer: Customer) -> bool:
        row = self.row_of(customer)
        if row < 0:
            return False
        self.beginRemoveRows(QModelIndex(), row, row)
        del self._customers[row]
        self.endRemoveRows()
        return True


class CustomerFilterModel(QSortFilterProxyModel):
    """Default view of a CustomerListModel. `filter = None` shows every row."""
    filter_changed = Signal()

    def __init__(self, source: CustomerListModel, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._filter: Optional[CustomerPredicate] = None
        self._source = source
        self.setSourceModel(source)

    @property
    def filter(self) -> Optional[CustomerPredicate]:
        return self._filter

    @filter.setter
    def filter(self, predicate: Optional[CustomerPredicate]) -> None:
        self.beginFilterChange()
        self._filter = predicate
        self.endFilterChange(QSortFilterProxyModel.Direction.Rows)
        self.filter_changed.emit()

    def filterAcceptsRow(self, source_row: int, source_parent: QModelIndex) -> bool:
        if self._filter is None:
            return True
        return bool(self._filter(self._source[source_row]))

    def visible_customers(self) -> List[Customer]:
        """Customers that pass the filter, in list order."""
        return [
            self._source[self.mapToSource(self.index(row, 0)).row()]
            for row in range(self.rowCount())
        ]
