# models/profile.py
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


class Profile(Base):
     """
     Profile model - a tenant record owned by one landlord (User).
     user_id is set at creation and never changes.
     """
     __tablename__ = "profiles"

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(
          Integer,
          ForeignKey("users.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     # Tenant info
     tenant_name = Column(String(200), nullable=False)
     contact_number = Column(String(50), nullable=False)
     room_number = Column(String(50), nullable=False, default="Unknown")

     # Terms (whole currency units)
     rent = Column(Integer, nullable=True)
     security_deposit = Column(Integer, nullable=True)
     move_in_date = Column(Date, nullable=True)
     description = Column(Text, nullable=True)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     user = relationship("User", back_populates="profiles")
     bills = relationship(
          "Bill",
          back_populates="profile",
          cascade="all, delete-orphan"
     )

     def __repr__(self):
          return f"<Profile(id={self.id}, tenant_name='{self.tenant_name}', user_id={self.user_id})>"
