# schemas/profile.py
"""
Pydantic schemas for tenant Profile request/response validation.
"""
from datetime import date, datetime
from typing import Optional, List
from pydantic import Field, ConfigDict, field_validator

from models import INTEGER_MAX
from .base import CamelModel, blank_to_none
from .bill import BillResponse


class ProfileCreate(CamelModel):
     """Schema for creating a new tenant profile."""
     tenant_name: str = Field(..., min_length=1, max_length=200, description="Tenant's name")
     contact_number: str = Field(..., min_length=1, max_length=50, description="Tenant's phone number")
     room_number: str = Field(default="Unknown", max_length=50, description="Room / unit label")
     rent: Optional[int] = Field(None, ge=0, le=INTEGER_MAX, description="Monthly rent")
     security_deposit: Optional[int] = Field(None, ge=0, le=INTEGER_MAX, description="Security deposit held")
     move_in_date: Optional[date] = None
     description: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "tenantName": "Ali",
                    "contactNumber": "03001234567",
                    "roomNumber": "2B",
                    "rent": 15000,
                    "securityDeposit": 30000,
                    "moveInDate": "2025-01-01",
                    "description": "Second floor, street-facing"
               }
          }
     )

     @field_validator("rent", "security_deposit", "move_in_date", "description", mode="before")
     @classmethod
     def _optional_blank(cls, v):
          return blank_to_none(v)

     @field_validator("room_number", mode="before")
     @classmethod
     def _room_default(cls, v):
          return blank_to_none(v) or "Unknown"


class ProfileUpdate(CamelModel):
     """
     Schema for replacing a profile's editable fields.

     Every editable field is resent; an absent optional field is cleared.
     """
     tenant_name: str = Field(..., min_length=1, max_length=200)
     contact_number: str = Field(..., min_length=1, max_length=50)
     rent: Optional[int] = Field(None, ge=0, le=INTEGER_MAX)
     security_deposit: Optional[int] = Field(None, ge=0, le=INTEGER_MAX)
     move_in_date: Optional[date] = None
     description: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "tenantName": "Ali Khan",
                    "contactNumber": "+923001234567",
                    "rent": 16000,
                    "securityDeposit": 30000,
                    "moveInDate": "2025-01-01",
                    "description": None
               }
          }
     )

     @field_validator("rent", "security_deposit", "move_in_date", "description", mode="before")
     @classmethod
     def _optional_blank(cls, v):
          return blank_to_none(v)


class ProfileResponse(CamelModel):
     """Schema for profile response."""
     id: int
     user_id: int
     tenant_name: str
     contact_number: str
     room_number: str
     rent: Optional[int] = None
     security_deposit: Optional[int] = None
     move_in_date: Optional[date] = None
     description: Optional[str] = None
     created_at: datetime
     updated_at: datetime

     model_config = ConfigDict(from_attributes=True)


class ProfileWithBillsResponse(ProfileResponse):
     """
     Profile plus its most recent bills, newest first.
     The list view carries at most one bill, the detail view at most five.
     """
     bills: List[BillResponse] = []
