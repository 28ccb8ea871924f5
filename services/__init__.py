# services/__init__.py
from .billing import compute_total, next_status
from .authorization import EntityKind, authorize, owned_profiles, owned_bills, require_identity
from .profile_service import ProfileService
from .bill_service import BillService
from .identity_service import get_or_create_user, create_access_token, decode_access_token

__all__ = [
     "compute_total",
     "next_status",
     "EntityKind",
     "authorize",
     "owned_profiles",
     "owned_bills",
     "require_identity",
     "ProfileService",
     "BillService",
     "get_or_create_user",
     "create_access_token",
     "decode_access_token",
]
