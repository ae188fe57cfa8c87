"""
JSON Customer Repository
Keeps customers in memory and writes them to a .json file on commit.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from importlib.metadata import version, PackageNotFoundError
from typing import List

from customerapp.config import DEFAULT_CUSTOMERS_PATH
from customerapp.model.customer import Customer
from customerapp.model.repository import CustomerRepository

logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("customerapp")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


class JsonCustomerRepository(CustomerRepository):
    """
    File-backed repository.

    Changes made with add/remove are staged in memory until commit() rewrites
    the whole file.
    """

    def __init__(self, filepath: str = DEFAULT_CUSTOMERS_PATH) -> None:
        self.filepath = filepath
        self._customers: List[Customer] = self._load(filepath)
        self._dirty = False

    @property
    def is_dirty(self) -> bool:
        """True when there are staged changes not yet committed."""
        return self._dirty

    def list(self) -> List[Customer]:
        return list(self._customers)

    def add(self, customer: Customer) -> bool:
        if customer in self._customers:
            logger.debug("Rejected customer: already in repository.")
            return False

        if customer.customer_id and any(c.customer_id == customer.customer_id for c in self._customers):
            logger.debug(f"Rejected customer: duplicate id '{customer.customer_id}'.")
            return False

        self._customers.append(customer)
        self._dirty = True
        return True

    def remove(self, customer: Customer) -> None:
        if customer not in self._customers:
            logger.warning(f"Cannot remove '{customer.display_name}': not in repository.")
            return
        self._customers.remove(customer)
        self._dirty = True

    def commit(self) -> None:
        logger.info(f"Saving {len(self._customers)} customers to: {self.filepath}")
        payload = {
            "version": APP_VERSION,
            "customers": [c.to_dict() for c in self._customers],
        }

        directory = os.path.dirname(os.path.abspath(self.filepath))
        os.makedirs(directory, exist_ok=True)

        # Write next to the target and swap, so a failed write keeps the old file
        fd, temp_path = tempfile.mkstemp(suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(temp_path, self.filepath)
        except Exception as e:
            logger.exception(f"Failed to save customers: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        self._dirty = False
        logger.info(f"Customers saved to: {self.filepath}")

    @staticmethod
    def _load(filepath: str) -> List[Customer]:
        if not os.path.exists(filepath):
            logger.info(f"No customer file at {filepath}, starting empty.")
            return []

        logger.info(f"Loading customers from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            msg = f"File '{filepath}' is not a valid customer file: {e}"
            logger.error(msg)
            raise ValueError(msg) from e

        records = data.get("customers") if isinstance(data, dict) else None
        if not isinstance(records, list):
            msg = f"File '{filepath}' has no 'customers' list."
            logger.error(msg)
            raise ValueError(msg)

        customers = []
        for i, record in enumerate(records):
            if not isinstance(record, dict):
                msg = f"File '{filepath}': customer #{i} is not an object."
                logger.error(msg)
                raise ValueError(msg)
            try:
                customers.append(Customer.from_dict(record))
            except ValueError as e:
                msg = f"File '{filepath}': customer #{i} is invalid: {e}"
                logger.error(msg)
                raise ValueError(msg) from e
        logger.debug(f"Loaded {len(customers)} customers.")
        return customers
