"""Error taxonomy shared by services and routers.

Services raise these; the exception handlers registered in ``heartkemy.main``
turn them into ``{"success": false, "error": ...}`` responses.
"""


class HeartKemyError(Exception):
    """Base class for all application errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(HeartKemyError):
    """Missing or malformed input. Raised before any storage call."""

    status_code = 400


class InvalidCoordinate(ValidationError):
    """Latitude outside [-90, 90] or longitude outside [-180, 180]."""


class InvalidSpeed(ValidationError):
    """Flight speed is zero, negative or not a finite number."""


class NotFoundError(HeartKemyError):
    status_code = 404


class StorageError(HeartKemyError):
    """
    The backing store rejected an operation.
    The message is generic and safe to show; the cause is only logged.
    """

    status_code = 500
