"""Settlement domain specific exceptions."""

from fastapi import status


class SettlementError(Exception):
    """Base class for settlement requests rejected before reaching the ledger."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Settlement rejected"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message is not None:
            self.message = message


class ValidationError(SettlementError):
    """Base class for requests that fail authenticity or shape checks."""


class InvalidRequestError(ValidationError):
    """Raised when the body is not a well-formed settlement request."""

    message = "Invalid request body"


class StaleRequestError(ValidationError):
    """Raised when the request timestamp is outside the freshness window."""

    status_code = status.HTTP_408_REQUEST_TIMEOUT
    message = "Request too old or too far in future"


class InvalidSignatureError(ValidationError):
    """Raised when the HMAC signature does not match the payload."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid signature"


class DuplicateRoundError(SettlementError):
    """Raised when the wallet and round were already settled."""

    status_code = status.HTTP_409_CONFLICT
    message = "Round already processed"
