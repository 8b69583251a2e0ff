from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from ..database import get_db
from ..models.account import Account
from ..schemas.common import IdResponse
from ..schemas.trip import TripCreate, TripResponse, TripUpdate
from ..services import trip_service
from ..core.permissions import get_current_account, require_admin

router = APIRouter(prefix="/api/trips", tags=["trips"])


@router.get("", response_model=List[TripResponse])
def get_trips(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    """Get all trips"""
    return trip_service.list_trips(db, skip=skip, limit=limit)


@router.get("/{trip_id}", response_model=TripResponse)
def get_trip(
    trip_id: int,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account)
):
    """Get a specific trip"""
    return trip_service.get_trip(db, trip_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def create_trip(
    trip: TripCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    """Create a new trip"""
    db_trip = trip_service.create_trip(db, trip)
    return {"id": db_trip.id}


@router.put("/{trip_id}", response_model=TripResponse)
def update_trip(
    trip_id: int,
    trip_update: TripUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    """Update description, dates and status of a trip"""
    return trip_service.update_trip(db, trip_id, trip_update)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_trip(
    trip_id: int,
    db: Session = Depends(get_db),
    current_account: Account = Depends(require_admin)
):
    trip_service.delete_trip(db, trip_id)
