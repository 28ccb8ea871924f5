# routers/__init__.py
from .auth import router as auth_router
from .profiles import router as profiles_router
from .bills import router as bills_router

__all__ = [
     "auth_router",
     "profiles_router",
     "bills_router",
]
