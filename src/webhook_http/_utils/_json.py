from functools import lru_cache
from typing import Any, Optional, get_origin

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from ..models.errors import SerializationError

# Types whose no-argument constructor gives their empty/zero value.
_DEFAULTABLE_TYPES = (bool, int, float, complex, str, bytes, list, dict, tuple, set)


@lru_cache(maxsize=128)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def serialize_json(payload: Any) -> bytes:
    """Encode a payload as UTF-8 JSON.

    Pydantic models are dumped by alias, so wire names declared with
    ``Field(alias=...)`` are used.
    """
    try:
        return to_json(payload, by_alias=True)
    except PydanticSerializationError as e:
        raise SerializationError(
            f"Payload of type {type(payload).__name__} is not JSON serializable: {e}"
        ) from e


def deserialize_json(content: bytes, response_type: Any = Any) -> Any:
    """Decode a JSON body and validate it into ``response_type``.

    An empty body decodes to ``None``.
    """
    if not content.strip():
        return None

    try:
        return _type_adapter(response_type).validate_json(content)
    except ValidationError as e:
        raise SerializationError(
            f"Response body could not be deserialized into {response_type!r}: {e}"
        ) from e


def default_value(result_type: Optional[type]) -> Any:
    """The value a call returns when it succeeds without producing a result."""
    origin = get_origin(result_type) or result_type
    if origin in _DEFAULTABLE_TYPES:
        return origin()
    return None
