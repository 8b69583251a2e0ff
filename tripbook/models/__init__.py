from ..database import Base
from .account import Account, AccountRole, Role
from .employee import Employee
from .trip import Trip, TripStatus
from .booking import Booking

__all__ = [
    "Base",
    "Account",
    "AccountRole",
    "Role",
    # Trip booking models
    "Employee",
    "Trip",
    "TripStatus",
    "Booking",
]
