"""Tests for public exceptions."""

import pytest

from clubhouse_sdk.exceptions import (
    STATUS_ERRORS,
    ClubhouseAPIError,
    ClubhouseConfigError,
    ClubhouseError,
    ClubhouseMarshalError,
    ClubhouseRequestError,
    ClubhouseValidationError,
    ResourceNotFoundError,
    SchemaMismatchError,
    ServerError,
    UnauthorizedError,
    UnprocessableError,
)


class TestClubhouseError:
    """Tests for base ClubhouseError."""

    def test_is_exception(self):
        """ClubhouseError should be an Exception."""
        assert issubclass(ClubhouseError, Exception)

    def test_can_be_raised(self):
        """ClubhouseError should be raisable with message."""
        with pytest.raises(ClubhouseError) as exc_info:
            raise ClubhouseError("test error")
        assert str(exc_info.value) == "test error"


class TestClubhouseRequestError:
    """Tests for ClubhouseRequestError."""

    def test_carries_request_details(self):
        """Should keep method, URL and bodies for diagnostics."""
        cause = OSError("connection refused")
        error = ClubhouseRequestError(
            "connection refused",
            method="GET",
            url="https://api.test/api/v2/epics?token=[REDACTED]",
            request_body=b"{}",
            cause=cause,
        )
        assert error.method == "GET"
        assert error.url == "https://api.test/api/v2/epics?token=[REDACTED]"
        assert error.request_body == b"{}"
        assert error.response_body is None
        assert error.cause is cause

    def test_message_names_request(self):
        """Message should name the method and URL."""
        error = ClubhouseRequestError("boom", method="PUT", url="https://api.test/x")
        assert str(error) == "clubhouse client request error: PUT https://api.test/x: boom"

    def test_inherits_from_clubhouse_error(self):
        """ClubhouseRequestError should inherit from ClubhouseError."""
        assert issubclass(ClubhouseRequestError, ClubhouseError)


class TestClubhouseAPIError:
    """Tests for status-mapped API errors."""

    @pytest.mark.parametrize(
        ("status", "error_class"),
        [
            (400, SchemaMismatchError),
            (401, UnauthorizedError),
            (404, ResourceNotFoundError),
            (422, UnprocessableError),
            (500, ServerError),
        ],
    )
    def test_status_mapping(self, status, error_class):
        """Each mapped status should have its own error class."""
        assert STATUS_ERRORS[status] is error_class
        assert error_class.status_code == status
        assert issubclass(error_class, ClubhouseAPIError)

    def test_unmapped_statuses(self):
        """Only the five documented statuses should be mapped."""
        assert set(STATUS_ERRORS) == {400, 401, 404, 422, 500}

    def test_message_without_detail(self):
        """Should format the default message with the status."""
        error = ResourceNotFoundError(method="GET", url="https://api.test/x")
        assert "Resource does not exist (404)" in str(error)
        assert error.detail is None
        assert error.status_code == 404

    def test_message_with_detail(self):
        """Should append the server message."""
        error = UnprocessableError("name already taken", method="POST", url="https://api.test/x")
        assert str(error).endswith("Unprocessable (422): name already taken")
        assert error.detail == "name already taken"

    def test_generic_status_code(self):
        """Base class should accept an explicit status code."""
        error = ClubhouseAPIError(method="GET", url="https://api.test/x", status_code=418)
        assert error.status_code == 418

    def test_can_be_caught_as_request_error(self):
        """Should be catchable as ClubhouseRequestError."""
        with pytest.raises(ClubhouseRequestError):
            raise ServerError(method="GET", url="https://api.test/x")


class TestOtherErrors:
    """Tests for config, marshal and validation errors."""

    def test_config_error(self):
        """ClubhouseConfigError should inherit from ClubhouseError."""
        assert issubclass(ClubhouseConfigError, ClubhouseError)
        with pytest.raises(ClubhouseConfigError) as exc_info:
            raise ClubhouseConfigError("Missing API token")
        assert str(exc_info.value) == "Missing API token"

    def test_marshal_error_keeps_cause(self):
        """ClubhouseMarshalError should keep the underlying cause."""
        cause = TypeError("not serializable")
        error = ClubhouseMarshalError("could not marshal", cause=cause)
        assert error.cause is cause
        assert issubclass(ClubhouseMarshalError, ClubhouseError)

    def test_validation_error_keeps_cause(self):
        """ClubhouseValidationError should keep the underlying cause."""
        cause = ValueError("bad json")
        error = ClubhouseValidationError("could not decode", cause=cause)
        assert error.cause is cause
        assert issubclass(ClubhouseValidationError, ClubhouseError)
