"""
JSON codec used by the dispatcher.

Request bodies are encoded with None fields omitted; responses are validated
into pydantic models. Every failure surfaces as ParseError.
"""

from __future__ import annotations
import json
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import ParseError

M = TypeVar("M", bound=BaseModel)


class JsonCodec:
    """Serialize request values to bytes and validate bytes into models."""

    def serialize(self, value: Any) -> bytes:
        """
        Encode a request value as JSON.

        Args:
            value: A pydantic model or a JSON-compatible mapping

        Returns:
            UTF-8 encoded JSON

        Raises:
            ParseError: If the value cannot be encoded
        """
        try:
            if isinstance(value, BaseModel):
                return value.model_dump_json(exclude_none=True).encode("utf-8")
            if isinstance(value, Mapping):
                return json.dumps(dict(value), separators=(",", ":")).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise ParseError(f"failed to serialize {type(value).__name__}", cause=e) from e

        raise ParseError(f"cannot serialize value of type {type(value).__name__}")

    def deserialize(self, data: bytes, model: Type[M]) -> M:
        """
        Decode a JSON payload into ``model``.

        Raises:
            ParseError: On malformed JSON or a payload that does not match the model
        """
        try:
            return model.model_validate_json(data or b"")
        except ValidationError as e:
            raise ParseError(f"failed to parse {model.__name__}", cause=e) from e


default_codec = JsonCodec()


__all__ = ["JsonCodec", "default_codec"]
