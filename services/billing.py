# services/billing.py
"""
Bill computation.

A bill's total is fixed when the bill is created:

     total = rent + (electric or 0) + (gas or 0) + (water or 0) + sum(custom field amounts)

Amounts are whole currency units; nothing is rounded. These functions are
pure: no database, clock or identity involved.
"""
from typing import Iterable, Optional, Union

from models.bill import BillStatus


def _custom_amount(field) -> int:
     """Custom fields arrive as schema objects or as stored JSON dicts."""
     if isinstance(field, dict):
          return field["amount"]
     return field.amount


def compute_total(
     rent: int,
     electric: Optional[int] = None,
     gas: Optional[int] = None,
     water: Optional[int] = None,
     custom_fields: Optional[Iterable] = None
) -> int:
     """
     Sum all charge components of a bill.

     Absent utilities count as 0. Rent is mandatory.

     Raises:
          ValueError: rent is None.
     """
     if rent is None:
          raise ValueError("rent is required")

     total = rent + (electric or 0) + (gas or 0) + (water or 0)
     total += sum(_custom_amount(f) for f in (custom_fields or ()))
     return total


def next_status(current: Union[BillStatus, str]) -> BillStatus:
     """The only bill state transition: pending <-> paid."""
     return BillStatus(current).toggled()
