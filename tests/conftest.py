"""
Shared test fixtures for CustomerApp.

Provides a Qt core application, mock repositories built from the
CustomerRepository interface, and sample customers.
"""
import pytest
from unittest.mock import create_autospec

from PySide6.QtCore import QCoreApplication

from customerapp.model.customer import Customer
from customerapp.model.repository import CustomerRepository


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QCoreApplication for the whole session (Qt models expect one)."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def sample_customers():
    return [
        Customer(customer_id="ALFKI", company_name="Alfreds Futterkiste", country="Germany"),
        Customer(customer_id="BLONP", company_name="Blondel père et fils", country="France"),
        Customer(customer_id="BOLID", company_name="Bólido Comidas preparadas", country="Spain"),
        Customer(customer_id="FRANR", company_name="France restauration", country="France"),
    ]


@pytest.fixture
def repository():
    """Mock repository with an empty listing that accepts every add."""
    repo = create_autospec(CustomerRepository, instance=True)
    repo.list.return_value = []
    repo.add.return_value = True
    return repo


@pytest.fixture
def populated_repository(repository, sample_customers):
    repository.list.return_value = list(sample_customers)
    return repository


@pytest.fixture
def notifications():
    """Collects names emitted on a view-model's property_changed signal."""
    names = []

    def _listen(vm):
        vm.property_changed.connect(names.append)
        return names

    return _listen
