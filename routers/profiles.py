# routers/profiles.py
"""
Profile API routes.

CRUD for the calling landlord's tenant profiles. Profiles owned by anyone
else answer 404 exactly like ids that do not exist.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import AuthenticatedRoute, verify_token
from models import Profile, Bill
from services.profile_service import ProfileService
from schemas.base import MessageResponse
from schemas.bill import BillResponse
from schemas.profile import (
     ProfileCreate,
     ProfileUpdate,
     ProfileResponse,
     ProfileWithBillsResponse,
)

router = APIRouter(prefix="/api/profiles", tags=["profiles"], route_class=AuthenticatedRoute)


@router.post(
     "",
     response_model=ProfileResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a tenant profile"
)
def create_profile(
     profile_data: ProfileCreate,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     """
     Create a new tenant profile owned by the caller.

     - **tenantName**: required
     - **contactNumber**: required
     - **roomNumber**: defaults to "Unknown"
     - **rent**, **securityDeposit**, **moveInDate**, **description**: optional
     """
     profile = ProfileService.create_profile(db, token.get("id"), profile_data)
     return ProfileResponse.model_validate(profile)


@router.get(
     "",
     response_model=List[ProfileWithBillsResponse],
     summary="List the caller's profiles"
)
def list_profiles(
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     """All of the caller's profiles, newest first, each with its latest bill."""
     return [
          _build_profile_response(profile, bills)
          for profile, bills in ProfileService.list_profiles(db, token.get("id"))
     ]


@router.get(
     "/{profile_id}",
     response_model=ProfileWithBillsResponse,
     summary="Get profile by ID"
)
def get_profile(
     profile_id: int,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     """Retrieve one profile with its 5 most recent bills."""
     profile, bills = ProfileService.get_profile(db, token.get("id"), profile_id)
     return _build_profile_response(profile, bills)


@router.put(
     "/{profile_id}",
     response_model=ProfileResponse,
     summary="Replace profile fields"
)
def update_profile(
     profile_id: int,
     profile_data: ProfileUpdate,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     """
     Update an existing profile.

     All editable fields are sent; optional fields left out are cleared.
     """
     profile = ProfileService.update_profile(db, token.get("id"), profile_id, profile_data)
     return ProfileResponse.model_validate(profile)


@router.delete(
     "/{profile_id}",
     response_model=MessageResponse,
     summary="Delete profile"
)
def delete_profile(
     profile_id: int,
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session)
):
     """
     Delete a profile by ID.

     Note: This permanently removes the profile and all of its bills.
     """
     ProfileService.delete_profile(db, token.get("id"), profile_id)
     return MessageResponse(message="Profile deleted successfully")


def _build_profile_response(profile: Profile, bills: List[Bill]) -> ProfileWithBillsResponse:
     """
     Helper function to attach an explicit bill list to a profile response.
     """
     return ProfileWithBillsResponse(
          **ProfileResponse.model_validate(profile).model_dump(),
          bills=[BillResponse.model_validate(bill) for bill in bills],
     )
