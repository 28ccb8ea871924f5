# config.py
"""
Runtime configuration for the Landlord backend.

Values come from the process environment (a local .env file is loaded first).
The entry point builds one Settings object and hands it to create_app();
handlers read it from request.app.state.settings.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load .env
load_dotenv()


def _build_database_url() -> str:
     """
     DATABASE_URL wins when set; otherwise assemble an Azure SQL URL
     from the DB_* variables. Falls back to a local SQLite file.
     """
     url = os.getenv("DATABASE_URL")
     if url:
          return url
     if not os.getenv("DB_SERVER"):
          return Settings.database_url

     safe_user = quote_plus(os.getenv("DB_USER") or "")
     safe_pass = quote_plus(os.getenv("DB_PASS") or "")
     server = os.getenv("DB_SERVER")
     port = os.getenv("DB_PORT", "1433")
     name = os.getenv("DB_NAME")
     return f"mssql+pymssql://{safe_user}:{safe_pass}@{server}:{port}/{name}"


@dataclass
class Settings:
     database_url: str = "sqlite:///./landlord.db"
     sql_echo: bool = False

     jwt_secret: str = "change-me-in-production"
     jwt_algorithm: str = "HS256"
     jwt_expires_minutes: int = 60 * 24 * 30  # 30 days

     # Shared with the OAuth front end; token exchange is disabled when unset
     identity_provider_secret: Optional[str] = None

     cors_origins: List[str] = field(default_factory=list)
     log_level: str = "INFO"

     whatsapp_country_code: str = "+92"
     currency_label: str = "PKR"

     port: int = 10000


def get_settings() -> Settings:
     """Build Settings from the environment."""
     origins = os.getenv("CORS_ORIGINS", "")
     return Settings(
          database_url=_build_database_url(),
          sql_echo=os.getenv("SQL_ECHO", "false").lower() == "true",
          jwt_secret=os.getenv("JWT_SECRET", Settings.jwt_secret),
          jwt_algorithm=os.getenv("JWT_ALGORITHM", Settings.jwt_algorithm),
          jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", Settings.jwt_expires_minutes)),
          identity_provider_secret=os.getenv("IDENTITY_PROVIDER_SECRET") or None,
          cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
          log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
          whatsapp_country_code=os.getenv("WHATSAPP_COUNTRY_CODE", Settings.whatsapp_country_code),
          currency_label=os.getenv("CURRENCY_LABEL", Settings.currency_label),
          port=int(os.getenv("PORT", Settings.port)),
     )
