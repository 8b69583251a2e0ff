from typing import List, Optional
from sqlalchemy.orm import Session
from ..models.booking import Booking


def get(db: Session, booking_id: int) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.id == booking_id).first()


def list_bookings(db: Session, skip: int = 0, limit: int = 100) -> List[Booking]:
    return db.query(Booking).order_by(Booking.id.asc()).offset(skip).limit(limit).all()


def list_by_employee(db: Session, employee_id: int) -> List[Booking]:
    return db.query(Booking).filter(Booking.employee_id == employee_id).order_by(Booking.id.asc()).all()


def find_by_employee_and_trip(db: Session, employee_id: int, trip_id: int) -> Optional[Booking]:
    return db.query(Booking).filter(
        Booking.employee_id == employee_id,
        Booking.trip_id == trip_id,
    ).first()

