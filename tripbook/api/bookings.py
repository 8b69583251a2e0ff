from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from ..database import get_db
from ..models.account import Account
from ..schemas.booking import BookingCreate, BookingResponse, BookingUpdate
from ..schemas.common import IdResponse
from ..services import booking_service
from ..core.permissions import get_current_account, require_admin

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.get("", response_model=List[BookingResponse])
def get_bookings(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    """Get all bookings"""
    return booking_service.list_bookings(db, skip=skip, limit=limit)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    """Get a specific booking"""
    return booking_service.get_booking(db, booking_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    """Book a trip for an employee"""
    db_booking = booking_service.create_booking(db, booking)
    return {"id": db_booking.id}


@router.put("/{booking_id}", response_model=BookingResponse)
def update_booking(
    booking_id: int,
    booking_update: BookingUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    return booking_service.update_booking(db, booking_id, booking_update)


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    booking_service.delete_booking(db, booking_id)
