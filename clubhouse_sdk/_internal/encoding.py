"""JSON encoding of request params.

Update params carry tri-state fields (see ``clubhouse_sdk.models.fields``).
They are first resolved into a wire record, a plain dict holding only the
fields that must appear on the wire, and then dumped as compact JSON.
"""

import json
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from clubhouse_sdk.exceptions import ClubhouseMarshalError
from clubhouse_sdk.models.fields import is_reset, is_unset
from clubhouse_sdk.models.params import UpdateParams


def _marshal(value: Any) -> Any:
    return to_jsonable_python(value, by_alias=True, exclude_none=True)


def resolve_wire_record(params: UpdateParams) -> dict[str, Any]:
    """Resolve update params into the record that gets serialized.

    Fields are visited in declaration order:

    - UNSET fields are left out,
    - RESET fields map to None (JSON null),
    - anything else maps to its JSON-compatible form.

    Args:
        params: The update params to resolve.

    Returns:
        A new dict keyed by wire name.

    Raises:
        PydanticSerializationError: If a value cannot be made JSON-compatible.
    """
    record: dict[str, Any] = {}
    for name, field in type(params).model_fields.items():
        value = getattr(params, name)
        if is_unset(value):
            continue
        key = field.serialization_alias or field.alias or name
        if is_reset(value):
            record[key] = None
        else:
            record[key] = _marshal(value)
    return record


def to_wire(params: BaseModel | dict[str, Any] | list[Any]) -> Any:
    """Convert request params of any supported kind to JSON-compatible data.

    Update params go through tri-state resolution. Other models are dumped
    with ``None`` fields dropped. Dicts and lists (bulk request wrappers) may
    hold models and are converted recursively.
    """
    if isinstance(params, UpdateParams):
        return resolve_wire_record(params)
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(params, dict):
        return {key: to_wire(value) for key, value in params.items()}
    if isinstance(params, list):
        return [to_wire(item) for item in params]
    return _marshal(params)


def encode_params(params: BaseModel | dict[str, Any] | list[Any]) -> bytes:
    """Encode request params as a compact JSON body.

    Args:
        params: Params model, or a dict/list wrapping params models.

    Returns:
        UTF-8 encoded JSON bytes. The same input always yields the same bytes.

    Raises:
        ClubhouseMarshalError: If any value cannot be encoded.
    """
    try:
        wire = to_wire(params)
        return json.dumps(
            wire, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise ClubhouseMarshalError(
            f"could not marshal {type(params).__name__}: {e}", cause=e
        ) from e
