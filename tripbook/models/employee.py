from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func
from ..database import Base


def normalize_username(username: str) -> str:
    return username.lower().replace(" ", "").replace("'", "")


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100))
    avatar_url = Column(String(500))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    bookings = relationship(
        "Booking",
        back_populates="employee",
        cascade="all, delete-orphan",
    )

    @validates("username")
    def _normalize_username(self, key, value):
        return normalize_username(value) if value is not None else value

    @validates("email")
    def _normalize_email(self, key, value):
        return value.lower() if value is not None else value

    @property
    def trip_ids(self):
        return [booking.trip_id for booking in self.bookings]
