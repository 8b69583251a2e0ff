import logging
from typing import List
from sqlalchemy.orm import Session
from ..core.exceptions import EntityNotFoundError, IllegalArgumentError
from ..crud import trip as trip_repo
from ..models.trip import Trip
from ..schemas.trip import TripCreate, TripUpdate

logger = logging.getLogger(__name__)


def validate_dates(start_date, end_date) -> None:
    if start_date > end_date:
        raise IllegalArgumentError("Start date must be before end date")


def list_trips(db: Session, skip: int = 0, limit: int = 100) -> List[Trip]:
    return trip_repo.list_trips(db, skip=skip, limit=limit)


def get_trip(db: Session, trip_id: int) -> Trip:
    trip = trip_repo.get(db, trip_id)
    if trip is None:
        raise EntityNotFoundError(f"Trip not found with id: {trip_id}")
    return trip


def create_trip(db: Session, data: TripCreate) -> Trip:
    validate_dates(data.start_date, data.end_date)
    trip = Trip(**data.dict())
    db.add(trip)
    db.commit()
    db.refresh(trip)
    logger.info("Created trip id=%s (%s - %s)", trip.id, trip.start_date, trip.end_date)
    return trip


def update_trip(db: Session, trip_id: int, data: TripUpdate) -> Trip:
    validate_dates(data.start_date, data.end_date)
    trip = get_trip(db, trip_id)
    for field, value in data.dict().items():
        setattr(trip, field, value)
    db.commit()
    db.refresh(trip)
    return trip


def delete_trip(db: Session, trip_id: int) -> None:
    trip = get_trip(db, trip_id)
    db.delete(trip)
    db.commit()
    logger.info("Deleted trip id=%s with its bookings", trip_id)
