from . import account, booking, employee, trip

__all__ = ["account", "booking", "employee", "trip"]
