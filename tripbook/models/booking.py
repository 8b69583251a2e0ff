from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        UniqueConstraint("employee_id", "trip_id", name="uq_booking_employee_trip"),
    )

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    request_date = Column(DateTime, nullable=False, default=datetime.now)
    notes = Column(Text)

    # Relationships
    employee = relationship("Employee", back_populates="bookings")
    trip = relationship("Trip", back_populates="bookings")
