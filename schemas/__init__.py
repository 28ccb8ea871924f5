# schemas/__init__.py
from .base import MessageResponse
from .bill import (
     CustomField,
     BillCreate,
     BillResponse,
     BillPreviewResponse,
     WhatsAppLinkResponse,
)
from .profile import (
     ProfileCreate,
     ProfileUpdate,
     ProfileResponse,
     ProfileWithBillsResponse,
)
from .auth import IdentityExchangeRequest, UserResponse, TokenResponse

__all__ = [
     "MessageResponse",
     "CustomField",
     "BillCreate",
     "BillResponse",
     "BillPreviewResponse",
     "WhatsAppLinkResponse",
     "ProfileCreate",
     "ProfileUpdate",
     "ProfileResponse",
     "ProfileWithBillsResponse",
     "IdentityExchangeRequest",
     "UserResponse",
     "TokenResponse",
]
