import logging
from datetime import datetime
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..core.exceptions import DuplicateBookingError, EntityNotFoundError
from ..crud import booking as booking_repo
from ..models.booking import Booking
from ..schemas.booking import BookingCreate, BookingUpdate
from .employee_service import get_employee
from .trip_service import get_trip

logger = logging.getLogger(__name__)


def list_bookings(db: Session, skip: int = 0, limit: int = 100) -> List[Booking]:
    return booking_repo.list_bookings(db, skip=skip, limit=limit)


def get_booking(db: Session, booking_id: int) -> Booking:
    booking = booking_repo.get(db, booking_id)
    if booking is None:
        raise EntityNotFoundError(f"Booking not found with id: {booking_id}")
    return booking


def _ensure_not_booked(db: Session, employee_id: int, trip_id: int, booking_id: int = None) -> None:
    existing = booking_repo.find_by_employee_and_trip(db, employee_id, trip_id)
    if existing is not None and existing.id != booking_id:
        logger.warning("Booking already exists (employee -> trip): %s -> %s", employee_id, trip_id)
        raise DuplicateBookingError()


def _commit(db: Session, booking: Booking) -> Booking:
    # a concurrent request can pass the existence check; the unique constraint catches it
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateBookingError() from e
    db.refresh(booking)
    return booking


def create_booking(db: Session, data: BookingCreate) -> Booking:
    employee = get_employee(db, data.employee_id)
    trip = get_trip(db, data.trip_id)
    _ensure_not_booked(db, employee.id, trip.id)

    booking = Booking(
        employee=employee,
        trip=trip,
        request_date=data.request_date or datetime.now(),
        notes=data.notes,
    )
    db.add(booking)
    booking = _commit(db, booking)
    logger.info("Employee %s booked trip %s (booking id=%s)", employee.id, trip.id, booking.id)
    return booking


def update_booking(db: Session, booking_id: int, data: BookingUpdate) -> Booking:
    booking = get_booking(db, booking_id)
    employee = get_employee(db, data.employee_id)
    trip = get_trip(db, data.trip_id)
    _ensure_not_booked(db, employee.id, trip.id, booking_id=booking.id)

    booking.employee = employee
    booking.trip = trip
    if data.request_date is not None:
        booking.request_date = data.request_date
    booking.notes = data.notes
    return _commit(db, booking)


def delete_booking(db: Session, booking_id: int) -> None:
    booking = get_booking(db, booking_id)
    db.delete(booking)
    db.commit()
