"""Domain errors raised by the auth and record services.

Routes translate these into HTTP responses; services never build responses.
"""


class WasteTrackError(Exception):
    """Base class for domain errors; ``message`` is safe to show to clients."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidCredentials(WasteTrackError):
    """Raised when a login attempt matches no user or the password is wrong."""


class TokenInvalid(WasteTrackError):
    """Raised for a bad signature, malformed payload or algorithm mismatch."""


class TokenExpired(WasteTrackError):
    """Raised when a correctly signed token is past its expiry."""


class StoreUnavailable(WasteTrackError):
    """Raised when the user store cannot be queried (connectivity or schema error)."""


class UnknownReference(WasteTrackError):
    """Raised when a waste type or location name does not exist in the catalog."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        label = "waste type" if field == "type" else field
        super().__init__(f"Unknown {label}: {value!r}")
