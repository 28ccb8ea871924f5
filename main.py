# main.py
"""
Landlord backend - FastAPI application entry point.

Start with: python main.py
(or: uvicorn main:create_app --factory --port 10000)
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, get_settings
from database import Database
from exceptions import AppError, InvalidInput, PersistenceFailure
from routers import auth_router, profiles_router, bills_router

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
     return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(exc: RequestValidationError) -> str:
     """First schema violation as 'field: issue'."""
     errors = exc.errors()
     if not errors:
          return InvalidInput.default_message
     first = errors[0]
     if first.get("type") == "json_invalid":
          return "Malformed JSON body"
     field = ".".join(str(loc) for loc in first.get("loc", ()) if loc not in ("body", "query", "path"))
     if first.get("type") == "missing":
          return f"{field} is required" if field else "Missing required field"
     return f"{field}: {first.get('msg')}" if field else first.get("msg", InvalidInput.default_message)


def register_exception_handlers(app: FastAPI) -> None:
     @app.exception_handler(AppError)
     async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
          if isinstance(exc, PersistenceFailure):
               logger.error("Persistence failure on %s %s", request.method, request.url.path)
          return _error_response(exc.status_code, exc.message)

     @app.exception_handler(RequestValidationError)
     async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
          return _error_response(InvalidInput.status_code, _validation_message(exc))

     @app.exception_handler(SQLAlchemyError)
     async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
          logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
          return _error_response(PersistenceFailure.status_code, PersistenceFailure.default_message)

     @app.exception_handler(StarletteHTTPException)
     async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
          # 404 Fallback
          if exc.status_code == 404:
               return _error_response(404, "Route not found")
          return _error_response(exc.status_code, str(exc.detail))

     @app.middleware("http")
     async def unhandled_error_middleware(request: Request, call_next):
          try:
               return await call_next(request)
          except Exception:
               logger.exception("Unhandled error on %s %s", request.method, request.url.path)
               return _error_response(PersistenceFailure.status_code, PersistenceFailure.default_message)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
     """
     Build the application.

     The caller owns configuration and the persistence handle; when omitted
     they are built from the environment.
     """
     settings = settings or get_settings()
     logging.basicConfig(
          level=getattr(logging, settings.log_level, logging.INFO),
          format="%(asctime)s %(levelname)s %(name)s - %(message)s",
     )
     if database is None:
          database = Database(settings.database_url, echo=settings.sql_echo)

     @asynccontextmanager
     async def lifespan(app: FastAPI):
          logger.info("Landlord backend starting up")
          yield
          database.dispose()
          logger.info("Landlord backend shut down")

     app = FastAPI(title="Landlord API", lifespan=lifespan)
     app.state.settings = settings
     app.state.database = database

     register_exception_handlers(app)

     # CORS (wraps the error middleware)
     app.add_middleware(
          CORSMiddleware,
          allow_origins=settings.cors_origins,
          allow_credentials=True,
          allow_methods=["*"],
          allow_headers=["*"],
     )

     app.include_router(auth_router)
     app.include_router(profiles_router)
     app.include_router(bills_router)

     @app.get("/api/health", tags=["system"])
     def health_check():
          return {"status": "ok", "database": database.check_connection()}

     return app


if __name__ == "__main__":
     port = get_settings().port
     uvicorn.run("main:create_app", factory=True, host="0.0.0.0", port=port, reload=True)
