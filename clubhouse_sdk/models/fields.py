"""Tri-state field markers for partial update params.

Every field of an update params model is in one of three states:

- UNSET: the field is not mentioned and is left out of the request body,
  so the server leaves the stored value unchanged.
- RESET: the field is sent as JSON ``null`` and the server clears it.
- any other value: the field is sent with that value.

Example:
    from clubhouse_sdk import RESET, UpdateCategoryParams

    UpdateCategoryParams(color=RESET)       # {"color":null}
    UpdateCategoryParams(color="#00ff00")   # {"color":"#00ff00"}
    UpdateCategoryParams()                  # {}

The markers are classified by type, never by content, so ``""`` is an
ordinary value and never means "reset".
"""

from typing import Any, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

T = TypeVar("T")


def _serialize_as_null(_value: Any) -> None:
    return None


class UnsetType:
    """Marker for a field the caller did not mention."""

    _instance: "UnsetType | None" = None

    def __new__(cls) -> "UnsetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "UnsetType":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "UnsetType":
        return self

    def __reduce__(self) -> str:
        return "UNSET"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(_serialize_as_null),
        )


class ResetType:
    """Marker for a field the caller wants cleared (sent as ``null``)."""

    _instance: "ResetType | None" = None

    def __new__(cls) -> "ResetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "RESET"

    def __copy__(self) -> "ResetType":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "ResetType":
        return self

    def __reduce__(self) -> str:
        return "RESET"

    @classmethod
    def _validate(cls, value: Any) -> "ResetType":
        # None is what a decoded JSON null looks like
        if value is None or isinstance(value, ResetType):
            return RESET
        raise ValueError("expected RESET or None")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(_serialize_as_null),
        )


UNSET = UnsetType()
RESET = ResetType()

# Names kept for callers used to one reset value per field kind.
RESET_ID = RESET
RESET_ESTIMATE = RESET
RESET_TIME = RESET
RESET_COLOR = RESET

# Field can be omitted or set, never cleared.
Omittable = T | UnsetType

# Field can be omitted, set, or cleared.
Nullable = T | ResetType | UnsetType


def is_unset(value: Any) -> bool:
    return isinstance(value, UnsetType)


def is_reset(value: Any) -> bool:
    return isinstance(value, ResetType)
