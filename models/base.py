# models/base.py
from sqlalchemy.orm import DeclarativeBase

# Largest value an Integer column holds on every supported backend (32-bit signed)
INTEGER_MAX = 2**31 - 1


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Every model sets its own __tablename__.
     """
