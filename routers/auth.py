# routers/auth.py
"""
Identity endpoints.

POST /api/auth/token is called server-to-server by the OAuth front end once
the provider has verified the user; it is protected by a shared secret.
"""
import hmac
from typing import Optional

from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from config import Settings
from database import get_session
from dependencies import get_settings, verify_token
from exceptions import Unauthenticated, NotFound
from models import User
from services.authorization import require_identity
from services.identity_service import get_or_create_user, create_access_token
from schemas.auth import IdentityExchangeRequest, TokenResponse, UserResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


def verify_identity_provider(
     x_identity_secret: Optional[str] = Header(None),
     settings: Settings = Depends(get_settings)
) -> None:
     expected = settings.identity_provider_secret
     if not expected or not x_identity_secret:
          raise Unauthenticated()
     if not hmac.compare_digest(x_identity_secret, expected):
          raise Unauthenticated()


@router.post(
     "/token",
     response_model=TokenResponse,
     summary="Exchange a verified OAuth identity for an API token"
)
def exchange_identity(
     body: IdentityExchangeRequest,
     _: None = Depends(verify_identity_provider),
     db: Session = Depends(get_session),
     settings: Settings = Depends(get_settings)
):
     user = get_or_create_user(db, body.email, body.name)
     return TokenResponse(
          token=create_access_token(settings, user.id),
          user=UserResponse.model_validate(user),
     )


@router.get(
     "/me",
     response_model=UserResponse,
     summary="Current user"
)
def get_me(
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     user_id = require_identity(token.get("id"))
     user = db.query(User).filter(User.id == user_id).first()
     if not user:
          raise NotFound("User not found")
     return UserResponse.model_validate(user)
