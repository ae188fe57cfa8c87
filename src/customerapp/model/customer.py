"""
Customer Record
===============
The record type shown in the customer list.

Equality is identity: two customers with the same field values are still two
different records, so the list and the selection can tell them apart.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any


@dataclass(eq=False)
class Customer:
    customer_id: str = ""
    company_name: str = ""
    contact_name: str = ""
    contact_title: str = ""
    address: str = ""
    city: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""
    fax: str = ""

    @property
    def display_name(self) -> str:
        """Text shown for the record in a list."""
        return self.company_name or self.customer_id or "(new customer)"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Customer:
        # Ignore unknown keys to stay compatible with older/newer files
        allowed = {f.name for f in fields(Customer)}
        filtered = {}
        for key, value in (data or {}).items():
            if key not in allowed:
                continue
            if isinstance(value, (dict, list)):
                raise ValueError(f"Customer field '{key}' must be text, got {type(value).__name__}.")
            # Every field is text; numbers from hand-edited files become strings
            filtered[key] = "" if value is None else str(value)
        return Customer(**filtered)
