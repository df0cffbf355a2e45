"""Shared plumbing for resource groups."""

from functools import cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from clubhouse_sdk._internal.dispatch import RequestDispatcher
from clubhouse_sdk.exceptions import ClubhouseValidationError

T = TypeVar("T")


@cache
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def decode(type_: type[T] | Any, content: bytes) -> T:
    """Decode a JSON response body into ``type_``.

    Raises:
        ClubhouseValidationError: If the body is not valid JSON for ``type_``.
    """
    try:
        return _adapter(type_).validate_json(content)
    except ValidationError as e:
        name = getattr(type_, "__name__", str(type_))
        raise ClubhouseValidationError(f"could not decode response as {name}: {e}", cause=e) from e


class ResourceGroup:
    """Base for the per-resource operation groups exposed by the client."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def _request(
        self,
        method: str,
        endpoint: str,
        result_type: type[T] | Any,
        params: BaseModel | dict[str, Any] | list[Any] | None = None,
    ) -> T:
        content = self._dispatcher.request_resource(method, endpoint, params)
        return decode(result_type, content)

    def _delete(
        self,
        endpoint: str,
        params: BaseModel | dict[str, Any] | list[Any] | None = None,
    ) -> None:
        self._dispatcher.request_resource("DELETE", endpoint, params)
