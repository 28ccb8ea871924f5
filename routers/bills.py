# routers/bills.py
"""
Bill API routes.

Bills are created against one of the caller's profiles, listed per profile,
toggled between pending and paid, deleted, and shared over WhatsApp.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from config import Settings
from database import get_session
from dependencies import AuthenticatedRoute, get_settings, verify_token
from exceptions import InvalidInput
from models import Bill, BillStatus
from services.authorization import EntityKind, authorize
from services.bill_service import BillService
from services.whatsapp_service import build_bill_message, build_whatsapp_url, normalize_phone
from schemas.base import MessageResponse
from schemas.bill import (
     BillCreate,
     BillResponse,
     BillPreviewResponse,
     WhatsAppLinkResponse,
)

router = APIRouter(prefix="/api/bills", tags=["bills"], route_class=AuthenticatedRoute)


@router.post(
     "",
     response_model=BillResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new bill"
)
def create_bill(
     bill_data: BillCreate,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     """
     Create a bill for one of the caller's tenant profiles.

     - **profileId**: profile being billed
     - **rent**: required
     - **electric**, **gas**, **water**: optional utilities
     - **customFields**: optional `[{name, amount}]` extra charges
     - **contactNumber**: required, stored on the bill as sent
     - **description**: optional

     The total is computed here and stored; the bill starts as `pending`.
     """
     bill = BillService.create_bill(db, token.get("id"), bill_data)
     return BillResponse.model_validate(bill)


@router.get(
     "",
     response_model=List[BillResponse],
     summary="List recent bills for a profile"
)
def list_bills(
     token: dict = Depends(verify_token),
     profile_id: Optional[int] = Query(None, alias="profileId", description="Profile to list bills for"),
     db: Session = Depends(get_session)
):
     """The 5 most recent bills of one of the caller's profiles, newest first."""
     if profile_id is None:
          raise InvalidInput("Profile ID is required")
     bills = BillService.list_bills(db, token.get("id"), profile_id)
     return [BillResponse.model_validate(bill) for bill in bills]


@router.post(
     "/preview",
     response_model=BillPreviewResponse,
     summary="Preview an unsaved bill"
)
def preview_bill(
     bill_data: BillCreate,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session),
     settings: Settings = Depends(get_settings)
):
     """
     Compute the total of a bill without saving it and build the WhatsApp
     message for it (status Pending).
     """
     profile = authorize(db, token.get("id"), EntityKind.PROFILE, bill_data.profile_id)
     total = BillService.bill_total(bill_data)
     message = build_bill_message(
          profile.tenant_name,
          bill_data.rent,
          bill_data.electric,
          bill_data.gas,
          bill_data.water,
          bill_data.custom_fields,
          total,
          BillStatus.PENDING,
          bill_data.description,
          currency=settings.currency_label,
     )
     phone = normalize_phone(bill_data.contact_number, settings.whatsapp_country_code)
     return BillPreviewResponse(
          total=total,
          phone=phone,
          message=message,
          url=build_whatsapp_url(phone, message),
     )


@router.patch(
     "/{bill_id}",
     response_model=BillResponse,
     summary="Toggle bill payment status"
)
def toggle_bill_status(
     bill_id: int,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     """Flip the bill between `pending` and `paid`."""
     bill = BillService.toggle_status(db, token.get("id"), bill_id)
     return BillResponse.model_validate(bill)


@router.delete(
     "/{bill_id}",
     response_model=MessageResponse,
     summary="Delete bill"
)
def delete_bill(
     bill_id: int,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     """
     Delete a bill by ID.

     Note: This permanently removes the bill record.
     """
     BillService.delete_bill(db, token.get("id"), bill_id)
     return MessageResponse(message="Bill deleted successfully")


@router.get(
     "/{bill_id}/whatsapp",
     response_model=WhatsAppLinkResponse,
     summary="WhatsApp link for a bill"
)
def get_bill_whatsapp_link(
     bill_id: int,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session),
     settings: Settings = Depends(get_settings)
):
     """Pre-filled WhatsApp message for a stored bill, sent to its contact number."""
     bill = BillService.get_bill(db, token.get("id"), bill_id)
     return _build_whatsapp_response(bill, settings)


def _build_whatsapp_response(bill: Bill, settings: Settings) -> WhatsAppLinkResponse:
     message = build_bill_message(
          bill.profile.tenant_name,
          bill.rent,
          bill.electric,
          bill.gas,
          bill.water,
          bill.custom_fields,
          bill.total,
          bill.status,
          bill.description,
          currency=settings.currency_label,
     )
     phone = normalize_phone(bill.contact_number, settings.whatsapp_country_code)
     return WhatsAppLinkResponse(
          phone=phone,
          message=message,
          url=build_whatsapp_url(phone, message),
     )
