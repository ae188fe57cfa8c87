"""
Customer Repository Interface
=============================
The capability set the view-model consumes. Implementations decide how the
records are stored; the view-model only lists, adds, removes and commits.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from customerapp.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def list(self) -> List[Customer]:
        """Return every customer, in storage order."""

    @abstractmethod
    def add(self, customer: Customer) -> bool:
        """Stage a new customer. Returns False if the record was rejected."""

    @abstractmethod
    def remove(self, customer: Customer) -> None:
        """Stage the removal of a customer."""

    @abstractmethod
    def commit(self) -> None:
        """Flush staged changes to durable storage."""
