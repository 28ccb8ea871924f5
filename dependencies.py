# dependencies.py
"""
Shared FastAPI dependencies.
"""
from typing import Callable

from fastapi import Request, Response
from fastapi.routing import APIRoute

from config import Settings
from exceptions import Unauthenticated
from services.identity_service import decode_access_token


def get_settings(request: Request) -> Settings:
     return request.app.state.settings


def _bearer_payload(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise Unauthenticated("Missing token")
     token = auth.split(" ", 1)[1].strip()
     if not token:
          raise Unauthenticated("Missing token")
     return decode_access_token(request.app.state.settings, token)


# Token Auth Dependency
def verify_token(request: Request) -> dict:
     """
     Decoded bearer token of the request.

     Routes on an AuthenticatedRoute router have already checked the token
     before their body was read; the payload is reused from there.
     """
     payload = getattr(request.state, "token_payload", None)
     if payload is not None:
          return payload
     return _bearer_payload(request)


class AuthenticatedRoute(APIRoute):
     """
     Route that rejects a request without a valid bearer token before the
     body is parsed or any parameter is validated.
     """

     def get_route_handler(self) -> Callable:
          route_handler = super().get_route_handler()

          async def authenticated_route_handler(request: Request) -> Response:
               request.state.token_payload = _bearer_payload(request)
               return await route_handler(request)

          return authenticated_route_handler
