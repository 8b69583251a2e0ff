from typing import List, Optional
from sqlalchemy.orm import Session
from ..models.booking import Booking
from ..models.trip import Trip


def get(db: Session, trip_id: int) -> Optional[Trip]:
    return db.query(Trip).filter(Trip.id == trip_id).first()


def list_trips(db: Session, skip: int = 0, limit: int = 100) -> List[Trip]:
    return db.query(Trip).order_by(Trip.id.asc()).offset(skip).limit(limit).all()


def list_by_employee(db: Session, employee_id: int) -> List[Trip]:
    return (
        db.query(Trip)
        .join(Booking, Booking.trip_id == Trip.id)
        .filter(Booking.employee_id == employee_id)
        .order_by(Trip.start_date.asc(), Trip.id.asc())
        .all()
    )
