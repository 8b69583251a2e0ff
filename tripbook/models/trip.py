import enum
from sqlalchemy import Column, Integer, String, Date, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class TripStatus(str, enum.Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    TripStatus.SCHEDULED: "Programmato",
    TripStatus.IN_PROGRESS: "In Corso",
    TripStatus.COMPLETED: "Completato",
    TripStatus.CANCELLED: "Annullato",
}


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(
        Enum(TripStatus, name="trip_status", native_enum=False, length=20),
        nullable=False,
        default=TripStatus.SCHEDULED,
    )
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    bookings = relationship(
        "Booking",
        back_populates="trip",
        cascade="all, delete-orphan",
    )

    @property
    def status_label(self):
        return self.status.label if self.status is not None else None

    @property
    def employee_ids(self):
        return [booking.employee_id for booking in self.bookings]
