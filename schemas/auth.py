# schemas/auth.py
"""
Pydantic schemas for the identity token exchange.
"""
from typing import Optional
from pydantic import Field, ConfigDict

from .base import CamelModel


class IdentityExchangeRequest(CamelModel):
     """Verified identity handed over by the OAuth front end."""
     email: str = Field(..., min_length=3, max_length=255)
     name: Optional[str] = Field(None, max_length=200)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {"email": "landlord@example.com", "name": "Landlord"}
          }
     )


class UserResponse(CamelModel):
     id: int
     email: str
     name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class TokenResponse(CamelModel):
     token: str
     user: UserResponse
