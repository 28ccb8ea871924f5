# schemas/bill.py
"""
Pydantic schemas for Bill API request/response validation.
"""
from datetime import datetime
from typing import Optional, List
from pydantic import Field, ConfigDict, field_validator

from models import BillStatus, INTEGER_MAX
from .base import CamelModel, blank_to_none


class CustomField(CamelModel):
     """A named extra charge on a bill (e.g. Internet)."""
     name: str = Field(..., min_length=1, max_length=100)
     amount: int = Field(..., ge=0, le=INTEGER_MAX)


class BillCreate(CamelModel):
     """Schema for creating a new bill."""
     profile_id: int = Field(..., gt=0, description="Profile being billed (must be owned by the caller)")
     rent: int = Field(..., ge=0, le=INTEGER_MAX, description="Rent for the period")
     electric: Optional[int] = Field(None, ge=0, le=INTEGER_MAX)
     gas: Optional[int] = Field(None, ge=0, le=INTEGER_MAX)
     water: Optional[int] = Field(None, ge=0, le=INTEGER_MAX)
     custom_fields: Optional[List[CustomField]] = None
     contact_number: str = Field(..., min_length=1, max_length=50, description="Number the bill is sent to")
     description: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "profileId": 1,
                    "rent": 20000,
                    "electric": 1500,
                    "gas": 800,
                    "water": 300,
                    "customFields": [{"name": "Internet", "amount": 2000}],
                    "contactNumber": "3001234567",
                    "description": "March"
               }
          }
     )

     @field_validator("electric", "gas", "water", "description", mode="before")
     @classmethod
     def _optional_blank(cls, v):
          return blank_to_none(v)


class BillResponse(CamelModel):
     """Schema for bill response."""
     id: int
     profile_id: int
     date: datetime
     rent: int
     electric: Optional[int] = None
     gas: Optional[int] = None
     water: Optional[int] = None
     custom_fields: Optional[List[CustomField]] = None
     total: int
     contact_number: str
     description: Optional[str] = None
     status: BillStatus

     model_config = ConfigDict(
          from_attributes=True,
          json_schema_extra={
               "example": {
                    "id": 1,
                    "profileId": 1,
                    "date": "2025-03-01T10:30:00",
                    "rent": 20000,
                    "electric": 1500,
                    "gas": 800,
                    "water": 300,
                    "customFields": [{"name": "Internet", "amount": 2000}],
                    "total": 24600,
                    "contactNumber": "3001234567",
                    "description": "March",
                    "status": "pending"
               }
          }
     )


class WhatsAppLinkResponse(CamelModel):
     """Pre-filled WhatsApp message for a bill."""
     phone: str
     message: str
     url: str


class BillPreviewResponse(WhatsAppLinkResponse):
     """Unsaved bill: computed total plus its WhatsApp message."""
     total: int
