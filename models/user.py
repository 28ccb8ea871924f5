# models/user.py
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from .base import Base


class User(Base):
     """
     User model - the landlord account.
     Rows are created by the identity adapter on first login and are
     never modified by the profile/bill endpoints.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), unique=True, nullable=False, index=True)
     name = Column(String(200), nullable=True)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     profiles = relationship("Profile", back_populates="user", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}')>"
