"""
Run with: python -m customerapp [--data customers.json] [--search TEXT]

Loads the customer file into a MainViewModel and prints the visible
customers, which is a quick way to check a data file and the search filter
without a window.
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication

from customerapp.config import DEFAULT_CUSTOMERS_PATH
from customerapp.logging_config import setup_logging
from customerapp.model.json_repository import JsonCustomerRepository
from customerapp.viewmodel.main_viewmodel import MainViewModel


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="customerapp", description="List customers from a data file.")
    parser.add_argument("--data", default=DEFAULT_CUSTOMERS_PATH, help="customer JSON file")
    parser.add_argument("--search", default="", help="show only customers whose country contains TEXT")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)

    logger = setup_logging(level=args.log_level, log_file=args.log_file)

    # Qt models need an application object
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    try:
        repository = JsonCustomerRepository(args.data)
    except ValueError as e:
        logger.error(str(e))
        return 1

    vm = MainViewModel(repository)
    vm.search_command.execute(args.search)

    for customer in vm.customers_view.visible_customers():
        print(f"{customer.customer_id:<8} {customer.company_name:<40} {customer.country}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
