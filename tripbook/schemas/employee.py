from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List
from ..models.employee import normalize_username


class EmployeeBase(BaseModel):
    username: str = Field(..., min_length=2, max_length=50)
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    avatar_url: Optional[str] = Field(None, max_length=500)

    # length limits apply to the stored form
    @field_validator("username", mode="before")
    @classmethod
    def normalize(cls, value):
        return normalize_username(value) if isinstance(value, str) else value


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(EmployeeBase):
    pass


class EmployeeResponse(BaseModel):
    id: int
    username: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    trip_ids: List[int] = []

    class Config:
        from_attributes = True
