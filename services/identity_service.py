# services/identity_service.py
"""
Identity adapter.

The OAuth handshake happens in the front end. Once it has a verified email
it exchanges it here for an internal user id, wrapped in a signed JWT that
every other endpoint accepts as a bearer token.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from config import Settings
from database import commit
from exceptions import Unauthenticated
from models import User

logger = logging.getLogger(__name__)


def get_or_create_user(db: Session, email: str, name: Optional[str] = None) -> User:
     """
     Find the user by email, creating it on first login.
     A supplied name replaces the stored one.
     """
     email = email.strip().lower()
     user = db.query(User).filter(User.email == email).first()
     if user is None:
          user = User(email=email, name=name)
          db.add(user)
          commit(db)
          db.refresh(user)
          logger.info("Created user id=%s on first login", user.id)
     elif name and name != user.name:
          user.name = name
          commit(db)
     return user


def create_access_token(settings: Settings, user_id: int) -> str:
     """Signed JWT carrying the user id and an expiry."""
     expires = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expires_minutes)
     return jwt.encode(
          {"id": user_id, "exp": expires},
          settings.jwt_secret,
          algorithm=settings.jwt_algorithm,
     )


def decode_access_token(settings: Settings, token: str) -> dict:
     """
     Verify signature and expiry and return the payload.

     Raises:
          Unauthenticated: invalid or expired token, or no user id in it.
     """
     try:
          payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
     except JWTError:
          raise Unauthenticated("Invalid token")

     if not isinstance(payload.get("id"), int):
          raise Unauthenticated("Invalid token")
     return payload
