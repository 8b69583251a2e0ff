import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..core.exceptions import EntityExistsError, EntityNotFoundError
from ..crud import booking as booking_repo
from ..crud import employee as employee_repo
from ..crud import trip as trip_repo
from ..models.booking import Booking
from ..models.employee import Employee, normalize_username
from ..models.trip import Trip
from ..schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


def list_employees(db: Session, skip: int = 0, limit: int = 100) -> List[Employee]:
    return employee_repo.list_employees(db, skip=skip, limit=limit)


def get_employee(db: Session, employee_id: int) -> Employee:
    employee = employee_repo.get(db, employee_id)
    if employee is None:
        raise EntityNotFoundError(f"Employee not found with id: {employee_id}")
    return employee


def _check_username_free(db: Session, username: str, employee_id: int = None) -> None:
    existing = employee_repo.get_by_username(db, normalize_username(username))
    if existing is not None and existing.id != employee_id:
        raise EntityExistsError(f"Employee username already exists: {existing.username}")


def _commit(db: Session, employee: Employee) -> Employee:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise EntityExistsError("Employee username already exists") from e
    db.refresh(employee)
    return employee


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    _check_username_free(db, data.username)
    employee = Employee(**data.dict())
    db.add(employee)
    employee = _commit(db, employee)
    logger.info("Created employee %s (id=%s)", employee.username, employee.id)
    return employee


def update_employee(db: Session, employee_id: int, data: EmployeeUpdate) -> Employee:
    employee = get_employee(db, employee_id)
    _check_username_free(db, data.username, employee_id=employee.id)
    for field, value in data.dict().items():
        setattr(employee, field, value)
    return _commit(db, employee)


def delete_employee(db: Session, employee_id: int) -> None:
    employee = get_employee(db, employee_id)
    db.delete(employee)
    db.commit()
    logger.info("Deleted employee id=%s with its bookings", employee_id)


def list_employee_trips(db: Session, employee_id: int) -> List[Trip]:
    get_employee(db, employee_id)
    return trip_repo.list_by_employee(db, employee_id)


def list_employee_bookings(db: Session, employee_id: int) -> List[Booking]:
    get_employee(db, employee_id)
    return booking_repo.list_by_employee(db, employee_id)
