"""Request dispatcher for the Clubhouse API."""

import json
import sys
from typing import Any

import httpx
from pydantic import BaseModel

from clubhouse_sdk._internal.dispatch.redaction import redact_body, redact_url
from clubhouse_sdk._internal.encoding import encode_params
from clubhouse_sdk._internal.ratelimit import RateLimiter
from clubhouse_sdk.exceptions import STATUS_ERRORS, ClubhouseRequestError, UnprocessableError

JSON_HEADERS = {"Content-Type": "application/json"}

# Multipart boundary used in test mode so upload bodies are reproducible.
TEST_MULTIPART_BOUNDARY = "predictableclubhousetestingboundarywowow"

FileTypes = list[tuple[str, tuple[str, Any]]]


class RequestDispatcher:
    """Sends requests to the Clubhouse API.

    Each request is built against ``{root_url}/{version}/{endpoint}`` with the
    auth token as the ``token`` query parameter, waits on the rate limiter,
    and is sent once. Error statuses are raised as typed exceptions; there
    are no retries.
    """

    def __init__(
        self,
        *,
        http_client: httpx.Client,
        limiter: RateLimiter,
        auth_token: str,
        root_url: str,
        version: str,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            http_client: The httpx client used to send requests.
            limiter: Rate limiter blocked on before every request.
            auth_token: The API token.
            root_url: Root URL of the API.
            version: API version path segment.
            debug: Enable debug logging to stderr.
        """
        self._http = http_client
        self._limiter = limiter
        self._auth_token = auth_token
        self._root_url = httpx.URL(root_url)
        self._version = version
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[clubhouse-sdk] {message}", file=sys.stderr)

    def make_url(self, endpoint: str) -> httpx.URL:
        """Build the full URL of an endpoint, token included.

        Any query string on the root URL is replaced by the token.
        """
        segments = [self._root_url.path, self._version, endpoint]
        path = "/".join(s.strip("/") for s in segments if s.strip("/"))
        return self._root_url.copy_with(path=f"/{path}", params={"token": self._auth_token})

    def send(
        self,
        method: str,
        endpoint: str,
        body: bytes | None = None,
        headers: dict[str, str] | None = None,
        *,
        files: FileTypes | None = None,
    ) -> bytes:
        """Send a request and return the raw response body.

        Args:
            method: HTTP method.
            endpoint: Path below the API version, e.g. ``"epics/12/comments"``.
            body: Raw request body.
            headers: Replaces the default JSON content type when given.
            files: Multipart form files; httpx builds the body from them.

        Returns:
            The response body bytes.

        Raises:
            ClubhouseRequestError: If the request cannot be built or sent.
            ClubhouseAPIError: If the API answers with a mapped error status.
        """
        url = self.make_url(endpoint)
        safe_url = redact_url(url)
        if headers is None:
            headers = dict(JSON_HEADERS)

        try:
            request = self._http.build_request(
                method, url, content=body or None, headers=headers, files=files
            )
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as e:
            raise ClubhouseRequestError(
                str(e), method=method, url=safe_url, request_body=body, cause=e
            ) from e

        # Blocks until the next request fits in the rate limit.
        self._limiter.take()

        self._log_debug(f"{method} {safe_url}")
        try:
            response = self._http.send(request)
        except httpx.HTTPError as e:
            raise ClubhouseRequestError(
                str(e), method=method, url=safe_url, request_body=body, cause=e
            ) from e

        content = response.content
        error_class = STATUS_ERRORS.get(response.status_code)
        if error_class is not None:
            self._log_debug(f"{method} {safe_url} failed with status {response.status_code}")
            detail = None
            if error_class is UnprocessableError:
                detail = _error_message(content)
            raise error_class(
                detail,
                method=method,
                url=safe_url,
                request_body=body,
                response_body=content,
            )
        return content

    def request_resource(
        self,
        method: str,
        endpoint: str,
        params: BaseModel | dict[str, Any] | list[Any] | None = None,
    ) -> bytes:
        """Encode params as the JSON body, send the request, return the body.

        Raises:
            ClubhouseMarshalError: If the params cannot be encoded.
            ClubhouseRequestError: See ``send``.
        """
        body = None
        if params is not None:
            body = encode_params(params)
            self._log_debug(f"body {redact_body(body)}")
        return self.send(method, endpoint, body)


def _error_message(content: bytes) -> str | None:
    """Extract ``message`` from an error body, if it is a JSON object with one."""
    try:
        data = json.loads(content)
    except (UnicodeDecodeError, ValueError):
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None
