"""Interface layer errors and domain error translation."""

from fastapi import HTTPException, status

from wingman.domain.error import (
    AlreadyPartneredError,
    ConflictError,
    DomainError,
    DuplicatePendingError,
    EmailTakenError,
    InvalidCredentialsError,
    InvalidStateError,
    NoPartnerError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Request carries no valid credentials."""

    pass


# First match wins, so subclasses must precede their bases
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AlreadyPartneredError, status.HTTP_400_BAD_REQUEST),
    (NoPartnerError, status.HTTP_400_BAD_REQUEST),
    (DuplicatePendingError, status.HTTP_400_BAD_REQUEST),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
    (EmailTakenError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error returned to clients.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the status code and the error message
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
