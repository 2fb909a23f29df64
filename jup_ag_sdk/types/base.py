"""
Base classes shared by request builders and response models

Requests are plain dataclasses serialized to camelCase query params or
JSON bodies. Responses are pydantic models that accept the camelCase wire
format and keep unknown upstream fields so they survive re-serialization.
"""

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..errors import DeserializationError

JsonInput = Union[str, bytes, bytearray, Dict[str, Any], List[Any]]


def _decode(type_name: str, data: JsonInput) -> Any:
    """Turn raw response text into Python objects, raising DeserializationError"""
    if isinstance(data, (bytes, bytearray, str)):
        try:
            text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
            if not text.strip():
                raise DeserializationError.empty(type_name)
            return json.loads(text)
        except ValueError as e:
            raise DeserializationError.invalid_json(type_name, e) from e
    if data is None:
        raise DeserializationError.empty(type_name)
    return data


class JsonModelMixin:
    """from_json / to_json for pydantic models"""

    @classmethod
    def from_json(cls, data: JsonInput):
        """
        Parse a response body into this model

        Args:
            data: JSON text, bytes, or an already-decoded dict/list

        Raises:
            DeserializationError: On empty, malformed or schema-violating input
        """
        type_name = cls.__name__
        payload = _decode(type_name, data)
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise DeserializationError.schema_mismatch(type_name, e) from e

    def to_json(self) -> Any:
        """Serialize back to the camelCase wire format"""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class ApiModel(JsonModelMixin, BaseModel):
    """Base class for response models"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


def to_wire_value(value: Any) -> Any:
    """Convert a request field value to its JSON representation"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        if isinstance(value, JsonModelMixin):
            return value.to_json()
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    if is_dataclass(value) and not isinstance(value, type):
        return to_wire_dict(value)
    if isinstance(value, (list, tuple)):
        return [to_wire_value(v) for v in value]
    if isinstance(value, dict):
        return {k: to_wire_value(v) for k, v in value.items()}
    return value


def to_wire_dict(obj: Any) -> Dict[str, Any]:
    """Serialize a request dataclass to a camelCase dict, dropping None fields"""
    body: Dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        key = f.metadata.get("alias") or to_camel(f.name)
        body[key] = to_wire_value(value)
    return body


def to_query_value(value: Any) -> str:
    """Format a value for a query string: bools lowercase, lists comma-joined"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_query_value(v) for v in value)
    return str(value)


def to_query_dict(obj: Any) -> Dict[str, str]:
    """Serialize a request dataclass to query params, dropping None fields"""
    params: Dict[str, str] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        key = f.metadata.get("alias") or to_camel(f.name)
        params[key] = to_query_value(value)
    return params


class JsonBodyRequest:
    """Mixin for request dataclasses sent as a POST body"""

    def to_json(self) -> Dict[str, Any]:
        return to_wire_dict(self)


class QueryRequest:
    """Mixin for request dataclasses sent as GET query params"""

    def to_query_params(self) -> Dict[str, str]:
        return to_query_dict(self)
