# services/bill_service.py
"""
Bill Service - business logic for tenant bills.

Bills are snapshots: amounts, total and contact number are written once at
creation. Status is the only field that changes afterwards.
"""
import logging
from typing import List

from sqlalchemy import desc
from sqlalchemy.orm import Session

from database import commit
from exceptions import InvalidInput
from models import Bill, BillStatus, INTEGER_MAX
from schemas.bill import BillCreate
from services.authorization import EntityKind, authorize, owned_bills, storable_id
from services.billing import compute_total

logger = logging.getLogger(__name__)

# Bills returned by the per-profile listing, newest first
BILL_LIST_LIMIT = 5


class BillService:
     """Service class for bill-related business logic."""

     @staticmethod
     def bill_total(data: BillCreate) -> int:
          """
          Total of a requested bill.

          Raises:
               InvalidInput: the sum is larger than a stored amount can be
          """
          total = compute_total(data.rent, data.electric, data.gas, data.water, data.custom_fields)
          if total > INTEGER_MAX:
               raise InvalidInput(f"total: must be at most {INTEGER_MAX}")
          return total

     @staticmethod
     def create_bill(db: Session, identity, data: BillCreate) -> Bill:
          """
          Create a pending bill for one of the caller's profiles.

          Raises:
               NotFound: profile absent or owned by another user
          """
          profile = authorize(db, identity, EntityKind.PROFILE, data.profile_id)

          custom_fields = None
          if data.custom_fields is not None:
               custom_fields = [field.model_dump() for field in data.custom_fields]

          bill = Bill(
               profile_id=profile.id,
               rent=data.rent,
               electric=data.electric,
               gas=data.gas,
               water=data.water,
               custom_fields=custom_fields,
               total=BillService.bill_total(data),
               contact_number=data.contact_number,
               description=data.description,
               status=BillStatus.PENDING,
          )
          db.add(bill)
          commit(db)
          db.refresh(bill)
          logger.info("Created bill id=%s for profile id=%s total=%s", bill.id, profile.id, bill.total)
          return bill

     @staticmethod
     def list_bills(db: Session, identity, profile_id: int) -> List[Bill]:
          """
          Most recent bills of a profile. A profile the caller does not own
          simply yields no bills.
          """
          bills = owned_bills(db, identity)
          if not storable_id(profile_id):
               return []
          return (
               bills
               .filter(Bill.profile_id == profile_id)
               .order_by(desc(Bill.date), desc(Bill.id))
               .limit(BILL_LIST_LIMIT)
               .all()
          )

     @staticmethod
     def get_bill(db: Session, identity, bill_id: int) -> Bill:
          return authorize(db, identity, EntityKind.BILL, bill_id)

     @staticmethod
     def toggle_status(db: Session, identity, bill_id: int) -> Bill:
          """Flip an owned bill between pending and paid."""
          bill = authorize(db, identity, EntityKind.BILL, bill_id)
          bill.toggle_status()
          commit(db)
          db.refresh(bill)
          logger.info("Bill id=%s is now %s", bill.id, bill.status.value)
          return bill

     @staticmethod
     def delete_bill(db: Session, identity, bill_id: int) -> None:
          bill = authorize(db, identity, EntityKind.BILL, bill_id)
          db.delete(bill)
          commit(db)
          logger.info("Deleted bill id=%s", bill_id)
