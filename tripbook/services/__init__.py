from . import account_service, booking_service, employee_service, trip_service

__all__ = ["account_service", "booking_service", "employee_service", "trip_service"]
