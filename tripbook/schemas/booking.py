from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class BookingCreate(BaseModel):
    employee_id: int = Field(..., ge=1)
    trip_id: int = Field(..., ge=1)
    request_date: Optional[datetime] = None
    notes: Optional[str] = None


class BookingUpdate(BaseModel):
    employee_id: int = Field(..., ge=1)
    trip_id: int = Field(..., ge=1)
    request_date: Optional[datetime] = None
    notes: Optional[str] = None


class BookingResponse(BaseModel):
    id: int
    employee_id: int
    trip_id: int
    request_date: datetime
    notes: Optional[str] = None

    class Config:
        from_attributes = True
