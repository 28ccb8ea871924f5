# services/authorization.py
"""
Ownership-scoped access control.

Every read or write of a Profile or Bill goes through authorize() or one of
the owned_* query builders. Ownership chain: Bill -> Profile -> User.

A missing entity and an entity owned by someone else produce the same
NotFound, so callers cannot probe for other landlords' data.
"""
import enum
from typing import Any, Optional

from sqlalchemy.orm import Session, Query

from exceptions import Unauthenticated, NotFound
from models import Profile, Bill, INTEGER_MAX


class EntityKind(str, enum.Enum):
     PROFILE = "profile"
     BILL = "bill"


NOT_FOUND_MESSAGES = {
     EntityKind.PROFILE: "Profile not found",
     EntityKind.BILL: "Bill not found",
}


def require_identity(identity: Optional[Any]) -> int:
     """
     Resolve the caller's user id.

     Raises:
          Unauthenticated: no identity, or one that is not a user id.
     """
     if identity is None or isinstance(identity, bool):
          raise Unauthenticated()
     try:
          return int(identity)
     except (TypeError, ValueError):
          raise Unauthenticated()


def storable_id(entity_id) -> bool:
     """Ids outside 1..INTEGER_MAX can never name a stored row."""
     return isinstance(entity_id, int) and not isinstance(entity_id, bool) and 1 <= entity_id <= INTEGER_MAX


def owned_profiles(db: Session, identity: Optional[Any]) -> Query:
     """Profiles belonging to the caller."""
     user_id = require_identity(identity)
     return db.query(Profile).filter(Profile.user_id == user_id)


def owned_bills(db: Session, identity: Optional[Any]) -> Query:
     """Bills whose profile belongs to the caller (joined through profiles)."""
     user_id = require_identity(identity)
     return (
          db.query(Bill)
          .join(Profile, Bill.profile_id == Profile.id)
          .filter(Profile.user_id == user_id)
     )


def authorize(db: Session, identity: Optional[Any], kind: EntityKind, entity_id: int):
     """
     Return the Profile or Bill identified by entity_id if the caller owns it.

     Raises:
          Unauthenticated: no caller identity.
          NotFound: entity absent or owned by another user.
     """
     kind = EntityKind(kind)
     if not storable_id(entity_id):
          require_identity(identity)
          raise NotFound(NOT_FOUND_MESSAGES[kind])

     if kind == EntityKind.PROFILE:
          entity = owned_profiles(db, identity).filter(Profile.id == entity_id).first()
     else:
          entity = owned_bills(db, identity).filter(Bill.id == entity_id).first()

     if entity is None:
          raise NotFound(NOT_FOUND_MESSAGES[kind])
     return entity
