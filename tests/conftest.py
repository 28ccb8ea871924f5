"""
Test configuration for the Landlord backend tests.

Every test gets a fresh in-memory SQLite database and an app built around
it, so no external database or server is needed.
"""
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
     sys.path.insert(0, str(_project_root))

from config import Settings
from database import Database
from main import create_app
from services.identity_service import create_access_token, get_or_create_user

PROVIDER_SECRET = "provider-secret"


@pytest.fixture
def settings() -> Settings:
     return Settings(
          database_url="sqlite://",
          jwt_secret="test-secret",
          identity_provider_secret=PROVIDER_SECRET,
          log_level="WARNING",
     )


@pytest.fixture
def database(settings: Settings):
     # One shared connection so every session sees the same in-memory database
     db = Database(settings.database_url, poolclass=StaticPool)
     db.init_db()
     yield db
     db.dispose()


@pytest.fixture
def app(settings: Settings, database: Database):
     return create_app(settings, database)


@pytest_asyncio.fixture
async def client(app):
     """Async httpx client using ASGI transport — no live server needed."""
     async with AsyncClient(
          transport=ASGITransport(app=app),
          base_url="http://test",
     ) as ac:
          yield ac


@pytest.fixture
def make_user(database: Database, settings: Settings):
     """Create (or fetch) a user and return (user_id, auth headers)."""
     def _make(email: str, name: str = None):
          with database.session() as db:
               user = get_or_create_user(db, email, name)
               user_id = user.id
          token = create_access_token(settings, user_id)
          return user_id, {"Authorization": f"Bearer {token}"}
     return _make


@pytest.fixture
def landlord(make_user):
     return make_user("landlord@example.com", "Landlord")


@pytest.fixture
def other_landlord(make_user):
     return make_user("other@example.com", "Other")
