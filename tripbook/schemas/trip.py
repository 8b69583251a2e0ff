from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date
from ..models.trip import TripStatus


class TripBase(BaseModel):
    description: str = Field(..., min_length=10, max_length=50)
    start_date: date
    end_date: date
    status: TripStatus = TripStatus.SCHEDULED


class TripCreate(TripBase):
    pass


class TripUpdate(TripBase):
    pass


class TripResponse(BaseModel):
    id: int
    description: str
    start_date: date
    end_date: date
    status: TripStatus
    status_label: Optional[str] = None
    employee_ids: List[int] = []

    class Config:
        from_attributes = True
