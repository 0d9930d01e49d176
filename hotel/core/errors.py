"""Domain errors raised by the store, the auth gate and the booking flow.

Routes translate these into HTTP responses; anything that escapes a route is
caught by the handler registered in ``hotel.main``.
"""


class HotelError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(HotelError):
    status_code = 400


class EntityNotFoundError(HotelError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class AuthorizationError(HotelError):
    status_code = 401


class ForbiddenError(AuthorizationError):
    """Authenticated, but not the active admin session."""

    status_code = 403


class PersistenceError(HotelError):
    status_code = 503

    def __init__(self, message: str, keys: list[str] | None = None):
        super().__init__(message)
        self.keys = keys or []


class PaymentError(HotelError):
    status_code = 402
