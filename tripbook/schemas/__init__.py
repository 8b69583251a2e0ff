from .common import IdResponse
from .account import (
    AccountRegistration, LoginRequest, Token,
    PasswordChange, RolesUpdate, EnabledUpdate, AccountDetails
)
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeResponse
from .trip import TripCreate, TripUpdate, TripResponse
from .booking import BookingCreate, BookingUpdate, BookingResponse

__all__ = [
    "IdResponse",
    "AccountRegistration", "LoginRequest", "Token",
    "PasswordChange", "RolesUpdate", "EnabledUpdate", "AccountDetails",
    # Trip booking schemas
    "EmployeeCreate", "EmployeeUpdate", "EmployeeResponse",
    "TripCreate", "TripUpdate", "TripResponse",
    "BookingCreate", "BookingUpdate", "BookingResponse",
]
