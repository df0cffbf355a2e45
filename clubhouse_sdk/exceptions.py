"""Public exceptions for the Clubhouse SDK."""


class ClubhouseError(Exception):
    """Base exception for all Clubhouse SDK errors."""


class ClubhouseConfigError(ClubhouseError):
    """Configuration error (missing auth token, invalid config)."""


class ClubhouseMarshalError(ClubhouseError):
    """Request params could not be encoded as JSON."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ClubhouseValidationError(ClubhouseError):
    """Response body could not be decoded into the expected model."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ClubhouseRequestError(ClubhouseError):
    """Error building or sending a request to the Clubhouse API.

    Attributes:
        method: HTTP method of the failed request.
        url: Request URL with the auth token redacted.
        request_body: Raw request body, if any.
        response_body: Raw response body, if a response was received.
        cause: Underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str,
        url: str,
        request_body: bytes | None = None,
        response_body: bytes | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(f"clubhouse client request error: {method} {url}: {message}")
        self.method = method
        self.url = url
        self.request_body = request_body
        self.response_body = response_body
        self.cause = cause


class ClubhouseAPIError(ClubhouseRequestError):
    """Error status returned by the Clubhouse API.

    Attributes:
        status_code: HTTP status of the response.
        detail: Server-supplied message, when the response carried one.
    """

    status_code: int | None = None
    default_message = "API error"

    def __init__(
        self,
        detail: str | None = None,
        *,
        method: str,
        url: str,
        status_code: int | None = None,
        request_body: bytes | None = None,
        response_body: bytes | None = None,
    ) -> None:
        if status_code is not None:
            self.status_code = status_code
        self.detail = detail
        message = f"{self.default_message} ({self.status_code})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(
            message,
            method=method,
            url=url,
            request_body=request_body,
            response_body=response_body,
        )


class SchemaMismatchError(ClubhouseAPIError):
    """Request body did not match the endpoint schema (400)."""

    status_code = 400
    default_message = "Schema mismatch"


class UnauthorizedError(ClubhouseAPIError):
    """Auth token missing or invalid (401)."""

    status_code = 401
    default_message = "Unauthorized"


class ResourceNotFoundError(ClubhouseAPIError):
    """Requested resource does not exist (404)."""

    status_code = 404
    default_message = "Resource does not exist"


class UnprocessableError(ClubhouseAPIError):
    """Request was well-formed but rejected (422)."""

    status_code = 422
    default_message = "Unprocessable"


class ServerError(ClubhouseAPIError):
    """Clubhouse API failed internally (500)."""

    status_code = 500
    default_message = "Server error"


STATUS_ERRORS: dict[int, type[ClubhouseAPIError]] = {
    400: SchemaMismatchError,
    401: UnauthorizedError,
    404: ResourceNotFoundError,
    422: UnprocessableError,
    500: ServerError,
}
