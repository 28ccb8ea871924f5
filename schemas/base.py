# schemas/base.py
"""
Shared base for request/response schemas.

Python attributes are snake_case; the JSON wire format is camelCase.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          str_strip_whitespace=True,
     )


def blank_to_none(value: Any) -> Any:
     """Form clients send "" for untouched optional inputs; treat that as absent."""
     if isinstance(value, str) and not value.strip():
          return None
     return value


class MessageResponse(BaseModel):
     """Confirmation body for delete operations."""
     message: str
