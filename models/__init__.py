# models/__init__.py
from .base import Base, INTEGER_MAX
from .user import User
from .profile import Profile
from .bill import Bill, BillStatus

__all__ = [
     "Base",
     "INTEGER_MAX",
     "User",
     "Profile",
     "Bill",
     "BillStatus",
]
