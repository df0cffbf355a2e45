"""Client configuration."""

import os
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

from clubhouse_sdk.exceptions import ClubhouseConfigError

DEFAULT_ROOT_URL = "https://api.clubhouse.io/api/"
DEFAULT_VERSION = "v2"
# Clubhouse allows 200 requests/minute, which rounds down to 3 per second.
DEFAULT_RATE_LIMIT = 3
DEFAULT_TIMEOUT = 30.0


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true")


class ClientConfig(BaseModel):
    """Settings for a ClubhouseClient.

    Defaults are applied here, at construction, so every client carries its
    own complete configuration.

    Attributes:
        auth_token: API token sent as the ``token`` query parameter.
        root_url: Root URL of the API.
        version: API version path segment.
        rate_limit: Requests per second; 0 disables rate limiting.
        timeout: Request timeout in seconds.
        debug: Log request bodies and URLs to stderr.
        test_mode: Use a fixed multipart boundary for file uploads.

    Invalid settings raise ClubhouseConfigError.
    """

    model_config = ConfigDict(frozen=True)

    auth_token: str = Field(repr=False)
    root_url: str = DEFAULT_ROOT_URL
    version: str = DEFAULT_VERSION
    rate_limit: int = Field(default=DEFAULT_RATE_LIMIT, ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False
    test_mode: bool = False

    @field_validator("auth_token")
    @classmethod
    def auth_token_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("auth_token must not be empty")
        return v

    @model_validator(mode="wrap")
    @classmethod
    def _raise_config_error(
        cls, data: Any, handler: ValidatorFunctionWrapHandler
    ) -> "ClientConfig":
        try:
            return handler(data)
        except ValidationError as e:
            raise ClubhouseConfigError(f"invalid client configuration: {e}") from e

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create a configuration from environment variables.

        Required environment variables:
            CLUBHOUSE_API_TOKEN: The API token.

        Optional environment variables:
            CLUBHOUSE_ROOT_URL: Root URL of the API.
            CLUBHOUSE_API_VERSION: API version (default: "v2").
            CLUBHOUSE_RATE_LIMIT: Requests per second, 0 for unlimited.
            CLUBHOUSE_TIMEOUT: Request timeout in seconds.
            CLUBHOUSE_DEBUG: Set to "1" or "true" to enable debug logging.
            CLUBHOUSE_TEST_MODE: Set to "1" or "true" for a fixed multipart boundary.

        Returns:
            A ClientConfig.

        Raises:
            ClubhouseConfigError: If CLUBHOUSE_API_TOKEN is missing or empty, or a
                setting is out of range.
            ValueError: If a numeric variable is malformed.
        """
        auth_token = os.environ.get("CLUBHOUSE_API_TOKEN")
        if not auth_token:
            raise ClubhouseConfigError("CLUBHOUSE_API_TOKEN is not set")

        rate_limit = int(os.environ.get("CLUBHOUSE_RATE_LIMIT", str(DEFAULT_RATE_LIMIT)))
        timeout = float(os.environ.get("CLUBHOUSE_TIMEOUT", str(DEFAULT_TIMEOUT)))

        return cls(
            auth_token=auth_token,
            root_url=os.environ.get("CLUBHOUSE_ROOT_URL") or DEFAULT_ROOT_URL,
            version=os.environ.get("CLUBHOUSE_API_VERSION") or DEFAULT_VERSION,
            rate_limit=rate_limit,
            timeout=timeout,
            debug=_env_flag("CLUBHOUSE_DEBUG"),
            test_mode=_env_flag("CLUBHOUSE_TEST_MODE"),
        )
