"""Unit tests for domain error to HTTP status mapping."""

import pytest

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
from wingman.interface.error import to_http_exception


@pytest.mark.parametrize(
    "error, status_code",
    [
        (ValidationError("bad"), 400),
        (AlreadyPartneredError("u1"), 400),
        (NoPartnerError("u1"), 400),
        (DuplicatePendingError("u1", "u2"), 400),
        (InvalidStateError("Partnership request", "r1", "accepted"), 400),
        (EmailTakenError("a@example.com"), 400),
        (NotFoundError("User", "u1"), 404),
        (NotAuthorizedError("partnership request", "r1", "u1"), 403),
        (InvalidCredentialsError(), 401),
        (ConflictError("race"), 409),
        (DomainError("unexpected"), 500),
    ],
)
def test_status_codes(error, status_code):
    exc = to_http_exception(error)

    assert exc.status_code == status_code
    assert exc.detail == str(error)


def test_already_partnered_message_is_kept():
    exc = to_http_exception(AlreadyPartneredError("u1", "You already have a partner"))

    assert exc.detail == "You already have a partner"
