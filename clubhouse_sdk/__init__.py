"""Clubhouse SDK for Python.

This SDK provides a typed client for the Clubhouse v2 REST API.

Public API:
    ClubhouseClient - User-facing client; resources are exposed as properties
    ClientConfig - Client configuration
    RESET / UNSET - Tri-state markers for partial updates
    models - Request params and response resources
    exceptions - Error types

Internal (system-level, not for direct use):
    _internal.dispatch - Request dispatch
    _internal.encoding - JSON encoding of request params
"""

from clubhouse_sdk._version import __version__
from clubhouse_sdk.client import ClubhouseClient
from clubhouse_sdk.config import ClientConfig
from clubhouse_sdk.exceptions import (
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
from clubhouse_sdk.models import (
    RESET,
    UNSET,
    CreateCategoryParams,
    CreateCommentParams,
    CreateEpicParams,
    CreateLabelParams,
    CreateMilestoneParams,
    CreateProjectParams,
    CreateStoryLinkParams,
    CreateStoryParams,
    CreateTaskParams,
    FileUpload,
    SearchParams,
    UpdateCategoryParams,
    UpdateCommentParams,
    UpdateEpicParams,
    UpdateFileParams,
    UpdateLabelParams,
    UpdateMilestoneParams,
    UpdateProjectParams,
    UpdateStoriesParams,
    UpdateStoryParams,
)

__all__ = [
    "__version__",
    "ClubhouseClient",
    "ClientConfig",
    # Tri-state markers
    "RESET",
    "UNSET",
    # Exceptions
    "ClubhouseAPIError",
    "ClubhouseConfigError",
    "ClubhouseError",
    "ClubhouseMarshalError",
    "ClubhouseRequestError",
    "ClubhouseValidationError",
    "ResourceNotFoundError",
    "SchemaMismatchError",
    "ServerError",
    "UnauthorizedError",
    "UnprocessableError",
    # Params
    "CreateCategoryParams",
    "CreateCommentParams",
    "CreateEpicParams",
    "CreateLabelParams",
    "CreateMilestoneParams",
    "CreateProjectParams",
    "CreateStoryLinkParams",
    "CreateStoryParams",
    "CreateTaskParams",
    "FileUpload",
    "SearchParams",
    "UpdateCategoryParams",
    "UpdateCommentParams",
    "UpdateEpicParams",
    "UpdateFileParams",
    "UpdateLabelParams",
    "UpdateMilestoneParams",
    "UpdateProjectParams",
    "UpdateStoriesParams",
    "UpdateStoryParams",
]
