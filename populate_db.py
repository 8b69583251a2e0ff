"""Fill the database with fake employees, trips and bookings for local testing"""
import argparse
import logging
import sys
from datetime import timedelta
from faker import Faker
from pydantic import ValidationError
from sqlalchemy.orm import Session
from tripbook.core.exceptions import DuplicateBookingError, EntityExistsError, EntityNotFoundError
from tripbook.database import SessionLocal
from tripbook.models import TripStatus
from tripbook.schemas import BookingCreate, EmployeeCreate, TripCreate
from tripbook.services import booking_service, employee_service, trip_service

logger = logging.getLogger("populate_db")


def populate_employees(db: Session, fake: Faker, count: int) -> list:
    ids = []
    for _ in range(count):
        first_name = fake.first_name()
        last_name = fake.last_name()
        email = f"{first_name}.{last_name}@{fake.domain_name()}".replace(" ", "").lower()
        try:
            employee = employee_service.create_employee(db, EmployeeCreate(
                username=f"{first_name}.{last_name}"[:50],
                first_name=first_name,
                last_name=last_name,
                email=email,
            ))
        except EntityExistsError:
            logger.error("Employee already exists: %s.%s", first_name, last_name)
            continue
        except ValidationError as e:
            logger.error("Generated employee rejected: %s", e)
            continue
        ids.append(employee.id)
    logger.info("Created %d employees", len(ids))
    return ids


def populate_trips(db: Session, fake: Faker, count: int) -> list:
    ids = []
    for _ in range(count):
        start_date = fake.date_between(start_date="today", end_date="+30d")
        trip = trip_service.create_trip(db, TripCreate(
            description=f"Trip to {fake.city()}"[:50].ljust(10, "."),
            start_date=start_date,
            end_date=start_date + timedelta(days=fake.random_int(1, 10)),
            status=fake.random_element(list(TripStatus)),
        ))
        ids.append(trip.id)
    logger.info("Created %d trips", len(ids))
    return ids


def populate_bookings(db: Session, fake: Faker, count: int, employee_ids: list, trip_ids: list) -> int:
    created = 0
    for _ in range(count):
        employee_id = fake.random_element(employee_ids)
        trip_id = fake.random_element(trip_ids)
        try:
            booking_service.create_booking(db, BookingCreate(
                employee_id=employee_id,
                trip_id=trip_id,
                request_date=fake.date_time_between(start_date="-90d", end_date="now"),
                notes=fake.sentence(),
            ))
        except DuplicateBookingError:
            logger.error("Booking already exists (employee -> trip): %s -> %s", employee_id, trip_id)
            continue
        except EntityNotFoundError:
            logger.error("Employee or trip not found")
            continue
        created += 1
    logger.info("Created %d bookings", created)
    return created


def populate(db: Session, employees: int = 30, trips: int = 15, bookings: int = 80, seed: int = None) -> dict:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    employee_ids = populate_employees(db, fake, employees)
    trip_ids = populate_trips(db, fake, trips)
    created = 0
    if employee_ids and trip_ids:
        created = populate_bookings(db, fake, bookings, employee_ids, trip_ids)
    return {"employees": len(employee_ids), "trips": len(trip_ids), "bookings": created}


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--employees", type=int, default=30)
    parser.add_argument("--trips", type=int, default=15)
    parser.add_argument("--bookings", type=int, default=80)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    db = SessionLocal()
    try:
        counts = populate(db, args.employees, args.trips, args.bookings, args.seed)
    finally:
        db.close()
    logger.info("Done: %s", counts)
    return 0


if __name__ == "__main__":
    sys.exit(main())
