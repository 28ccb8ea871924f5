# models/bill.py
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, JSON, func
from sqlalchemy.orm import relationship
from .base import Base


class BillStatus(str, enum.Enum):
     """Enumeration for bill payment status."""
     PENDING = "pending"
     PAID = "paid"

     def toggled(self) -> "BillStatus":
          """pending -> paid, paid -> pending."""
          return BillStatus.PAID if self == BillStatus.PENDING else BillStatus.PENDING


class Bill(Base):
     """
     Bill model - a billing-period snapshot for one tenant Profile.

     All amounts, the total and the contact number are fixed at creation.
     Only status changes afterwards. The owning user is reached through
     profile.user_id and is never stored here.
     """
     __tablename__ = "bills"

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Foreign keys
     profile_id = Column(
          Integer,
          ForeignKey("profiles.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     # Bill details (whole currency units)
     date = Column(DateTime, server_default=func.now(), nullable=False, index=True)
     rent = Column(Integer, nullable=False)
     electric = Column(Integer, nullable=True)
     gas = Column(Integer, nullable=True)
     water = Column(Integer, nullable=True)
     custom_fields = Column(JSON, nullable=True)  # [{"name": str, "amount": int}, ...]
     total = Column(Integer, nullable=False)
     contact_number = Column(String(50), nullable=False)
     description = Column(Text, nullable=True)
     status = Column(
          Enum(BillStatus, name="bill_status", create_constraint=True),
          default=BillStatus.PENDING,
          nullable=False,
          index=True
     )

     # Relationships
     profile = relationship("Profile", back_populates="bills")

     def __repr__(self):
          return f"<Bill(id={self.id}, profile_id={self.profile_id}, total={self.total}, status='{self.status.value}')>"

     def toggle_status(self) -> None:
          """Flip the payment status."""
          self.status = self.status.toggled()
