"""
serialization.py
================
Compact JSON encoding and typed decoding helpers.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from cssforge.exceptions import SerializationError

T = TypeVar('T')


def _attributes(value: Any) -> dict[str, Any]:
    # Plain objects encode their own attributes
    if not hasattr(value, '__dict__'):
        raise TypeError(f'Unable to serialize unknown type: {type(value)!r}')
    return vars(value)


def get_json(value: Any) -> str:
    """Return the compact JSON representation of a value.

    Supports primitives, lists, dicts, dataclasses, pydantic models and
    plain objects (through their instance attributes).

    Args:
        value: Value to encode

    Returns:
        JSON text without insignificant whitespace.

    Raises:
        SerializationError: If the value cannot be encoded.

    Example:
        >>> get_json([1, 2, 3])
        '[1,2,3]'

    """
    try:
        return to_json(value, fallback=_attributes).decode('utf-8')
    except (PydanticSerializationError, TypeError) as e:
        raise SerializationError(f'Cannot encode {type(value).__name__}: {e}') from e


def from_json(cls: type[T], text: str | bytes) -> T:
    """Decode JSON into an instance of cls.

    Pydantic models are validated. Other classes get an instance created
    without running __init__, with the decoded keys set as attributes.

    Args:
        cls: Target class
        text: JSON text holding an object

    Returns:
        Instance of cls.

    Raises:
        SerializationError: If the text is not valid JSON, is not an object,
            or fails model validation.

    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise SerializationError(f'Invalid {cls.__name__} JSON: {e}') from e

    try:
        data = json.loads(text)
    except ValueError as e:
        raise SerializationError(f'Invalid JSON: {e}') from e

    if not isinstance(data, dict):
        raise SerializationError(f'Expected a JSON object for {cls.__name__}, got {type(data).__name__}')

    instance = cls.__new__(cls)
    vars(instance).update(data)
    return instance
