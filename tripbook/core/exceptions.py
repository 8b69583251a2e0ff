"""Typed errors raised by services and the security layer.

Routers never catch these; the handlers in ``errors.py`` turn them into
HTTP responses.
"""


class TripBookError(Exception):
    """Base class for every error the API knows how to translate"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class IllegalArgumentError(TripBookError):
    """Input that is well-formed but not acceptable (bad range, bad value)"""


class EntityNotFoundError(TripBookError):
    pass


class EntityExistsError(TripBookError):
    """A unique key is already taken"""


class DuplicateBookingError(IllegalArgumentError):
    """The employee already holds a booking for the trip"""

    def __init__(self):
        super().__init__("The employee has already booked this trip.")


class AccessDeniedError(TripBookError):
    pass


class AuthenticationError(TripBookError):
    """Bad credentials, unusable account, or missing/invalid token"""


class InvalidTokenError(AuthenticationError):
    pass


class TokenExpiredError(InvalidTokenError):
    pass


class MalformedTokenError(InvalidTokenError):
    pass


class InvalidSignatureError(InvalidTokenError):
    pass
