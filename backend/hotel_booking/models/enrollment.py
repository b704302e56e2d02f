"""
Enrollment (the user's registered event profile) and its postal address.

An enrollment is the first eligibility gate for a hotel booking.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from hotel_booking.db.base import Base, TimestampMixin


class Enrollment(Base, TimestampMixin):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    cpf = Column(String(11), unique=True, nullable=False)
    birthday = Column(Date, nullable=False)
    phone = Column(String(32), nullable=False)
    # One enrollment per user
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    user = relationship("User", back_populates="enrollment")
    addresses = relationship("Address", back_populates="enrollment", lazy="selectin")
    tickets = relationship("Ticket", back_populates="enrollment")

    def __repr__(self) -> str:
        return f"<Enrollment(id={self.id}, user={self.user_id})>"


class Address(Base, TimestampMixin):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, index=True)
    cep = Column(String(16), nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    state = Column(String(64), nullable=False)
    number = Column(String(16), nullable=False)
    neighborhood = Column(String(255), nullable=False)
    address_detail = Column(String(255), nullable=True)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), nullable=False, index=True)

    enrollment = relationship("Enrollment", back_populates="addresses")

    def __repr__(self) -> str:
        return f"<Address(id={self.id}, enrollment={self.enrollment_id}, city={self.city})>"
