"""Tests for the error taxonomy."""

import pytest

from network_as_code import errors


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (401, errors.AuthError),
        (403, errors.AuthError),
        (404, errors.NotFoundError),
        (500, errors.ServerError),
        (599, errors.ServerError),
        (400, errors.APIError),
        (422, errors.APIError),
    ],
)
def test_error_from_status(status, expected):
    """Each status maps to exactly the expected class."""
    error = errors.error_from_status(status, "boom")
    assert type(error) is expected
    assert error.status == status
    assert error.message == "boom"


def test_api_errors_share_base():
    """Auth, not-found and server errors are all APIError and NaCError."""
    for cls in (errors.AuthError, errors.NotFoundError, errors.ServerError):
        assert issubclass(cls, errors.APIError)
        assert issubclass(cls, errors.NaCError)


def test_validation_error_is_not_api_error():
    """Client-side validation failures are distinguishable from API errors."""
    assert not issubclass(errors.ValidationError, errors.APIError)
    assert issubclass(errors.ValidationError, errors.NaCError)


def test_network_error_is_not_api_error():
    """Transport failures are distinguishable from API errors."""
    assert not issubclass(errors.NetworkError, errors.APIError)
