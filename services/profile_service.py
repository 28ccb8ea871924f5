# services/profile_service.py
"""
Profile Service - business logic for tenant profiles.

All access is scoped to the calling landlord through services.authorization.
"""
import logging
from typing import Dict, List, Sequence, Tuple

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from database import commit
from models import Profile, Bill
from schemas.profile import ProfileCreate, ProfileUpdate
from services.authorization import EntityKind, authorize, owned_profiles, require_identity

logger = logging.getLogger(__name__)

# Bills embedded in profile responses, newest first
LATEST_BILL_PREVIEW_LIMIT = 1
PROFILE_DETAIL_BILL_LIMIT = 5


def recent_bills(db: Session, profile_id: int, limit: int) -> List[Bill]:
     """Most recent bills of one profile. Callers must have authorized the profile."""
     return (
          db.query(Bill)
          .filter(Bill.profile_id == profile_id)
          .order_by(desc(Bill.date), desc(Bill.id))
          .limit(limit)
          .all()
     )


def latest_bills_by_profile(db: Session, profile_ids: Sequence[int], limit: int) -> Dict[int, List[Bill]]:
     """
     Most recent bills of several profiles in one query, keyed by profile id.
     Callers must have authorized every profile.
     """
     grouped = {profile_id: [] for profile_id in profile_ids}
     if not grouped:
          return grouped

     ranked = (
          db.query(
               Bill.id.label("bill_id"),
               func.row_number().over(
                    partition_by=Bill.profile_id,
                    order_by=(desc(Bill.date), desc(Bill.id)),
               ).label("position"),
          )
          .filter(Bill.profile_id.in_(list(grouped)))
          .subquery()
     )
     bills = (
          db.query(Bill)
          .join(ranked, Bill.id == ranked.c.bill_id)
          .filter(ranked.c.position <= limit)
          .order_by(desc(Bill.date), desc(Bill.id))
          .all()
     )
     for bill in bills:
          grouped[bill.profile_id].append(bill)
     return grouped


class ProfileService:
     """Service class for profile-related business logic."""

     @staticmethod
     def create_profile(db: Session, identity, data: ProfileCreate) -> Profile:
          """
          Create a tenant profile owned by the caller.

          Args:
               db: SQLAlchemy database session
               identity: caller's user id
               data: validated profile fields

          Returns:
               Created Profile with id and timestamps loaded
          """
          user_id = require_identity(identity)
          profile = Profile(
               user_id=user_id,
               tenant_name=data.tenant_name,
               contact_number=data.contact_number,
               room_number=data.room_number,
               rent=data.rent,
               security_deposit=data.security_deposit,
               move_in_date=data.move_in_date,
               description=data.description,
          )
          db.add(profile)
          commit(db)
          db.refresh(profile)
          logger.info("Created profile id=%s for user id=%s", profile.id, user_id)
          return profile

     @staticmethod
     def list_profiles(db: Session, identity) -> List[Tuple[Profile, List[Bill]]]:
          """
          All of the caller's profiles, newest first, each paired with
          its latest bill (if any).
          """
          profiles = (
               owned_profiles(db, identity)
               .order_by(desc(Profile.created_at), desc(Profile.id))
               .all()
          )
          latest = latest_bills_by_profile(db, [profile.id for profile in profiles], LATEST_BILL_PREVIEW_LIMIT)
          return [(profile, latest[profile.id]) for profile in profiles]

     @staticmethod
     def get_profile(db: Session, identity, profile_id: int) -> Tuple[Profile, List[Bill]]:
          """One owned profile with its five most recent bills."""
          profile = authorize(db, identity, EntityKind.PROFILE, profile_id)
          return profile, recent_bills(db, profile.id, PROFILE_DETAIL_BILL_LIMIT)

     @staticmethod
     def update_profile(db: Session, identity, profile_id: int, data: ProfileUpdate) -> Profile:
          """
          Replace the editable fields of an owned profile.

          Owner and room label are left untouched; optional fields missing
          from the request are cleared.
          """
          profile = authorize(db, identity, EntityKind.PROFILE, profile_id)

          profile.tenant_name = data.tenant_name
          profile.contact_number = data.contact_number
          profile.rent = data.rent
          profile.security_deposit = data.security_deposit
          profile.move_in_date = data.move_in_date
          profile.description = data.description

          commit(db)
          db.refresh(profile)
          logger.info("Updated profile id=%s", profile.id)
          return profile

     @staticmethod
     def delete_profile(db: Session, identity, profile_id: int) -> None:
          """Delete an owned profile together with all of its bills."""
          profile = authorize(db, identity, EntityKind.PROFILE, profile_id)
          db.delete(profile)
          commit(db)
          logger.info("Deleted profile id=%s", profile_id)
