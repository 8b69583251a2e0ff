from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from ..database import get_db
from ..models.account import Account
from ..schemas.booking import BookingResponse
from ..schemas.common import IdResponse
from ..schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from ..schemas.trip import TripResponse
from ..services import employee_service
from ..core.permissions import get_current_account, require_admin

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=List[EmployeeResponse])
def get_employees(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    """Get all employees"""
    return employee_service.list_employees(db, skip=skip, limit=limit)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    """Get a specific employee"""
    return employee_service.get_employee(db, employee_id)


@router.get("/{employee_id}/trips", response_model=List[TripResponse])
def get_employee_trips(
    employee_id: int,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    """Trips the employee has booked"""
    return employee_service.list_employee_trips(db, employee_id)


@router.get("/{employee_id}/bookings", response_model=List[BookingResponse])
def get_employee_bookings(
    employee_id: int,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    return employee_service.list_employee_bookings(db, employee_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee: EmployeeCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    """Create a new employee"""
    db_employee = employee_service.create_employee(db, employee)
    return {"id": db_employee.id}


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    employee_update: EmployeeUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    """Update an existing employee"""
    return employee_service.update_employee(db, employee_id, employee_update)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    """Delete an employee together with its bookings"""
    employee_service.delete_employee(db, employee_id)
