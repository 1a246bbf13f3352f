"""
Mapping between typed request/response models and their wire representation.

Requests become either a flat ``str -> str`` query map (GET) or a JSON body (POST).
Responses are decoded from the raw body, optionally unwrapping the v2
``{"ok": true, "result": ...}`` envelope first. Everything here is a pure
function of its arguments.
"""

import functools
import json
import typing
from enum import Enum

import pydantic

from .errors import DecodeError, ProtocolError


class Model(pydantic.BaseModel):
    """Base for every request and response record: immutable, tolerant of unknown keys."""

    model_config: typing.ClassVar[pydantic.ConfigDict] = pydantic.ConfigDict(
        frozen=True,
        extra="ignore",
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )


def _query_value(value: typing.Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, set, frozenset)):
        items = typing.cast(typing.Iterable[typing.Any], value)
        parts = [str(_query_value(item)) for item in items]
        return ",".join(parts) if parts else None
    return str(value)


def encode_query(params: pydantic.BaseModel) -> dict[str, str]:
    """
    Build GET query parameters from a request model.

    Fields left at ``None`` and empty lists are omitted; fields with defaults
    (``limit``, ``offset``, ``sort``, ...) are always sent. Lists are joined
    with commas in their original order.
    """
    query: dict[str, str] = {}
    for name, field in type(params).model_fields.items():
        value = _query_value(getattr(params, name))
        if value is not None:
            query[field.alias or name] = value
    return query


def encode_body(params: pydantic.BaseModel) -> str:
    return params.model_dump_json(by_alias=True)


@functools.cache
def _adapter(target: typing.Any) -> pydantic.TypeAdapter[typing.Any]:
    return pydantic.TypeAdapter(target)


def _type_name(target: typing.Any) -> str:
    return getattr(target, "__name__", None) or str(target)


def _unwrap_envelope(payload: typing.Any) -> typing.Any:
    if not isinstance(payload, dict):
        raise ProtocolError(f"expected response envelope object, got {type(payload).__name__}")
    envelope = typing.cast(dict[str, typing.Any], payload)

    code = envelope.get("code")
    error = envelope.get("error")
    if envelope.get("ok") is not True:
        raise ProtocolError(
            f"request failed: {error or 'ok is not true'}",
            code=code if isinstance(code, int) else None,
            error=error if isinstance(error, str) else None,
        )
    if "result" not in envelope:
        raise ProtocolError("response envelope has no result")
    return envelope["result"]


def decode[T](body: str | bytes, target: type[T] | typing.Any, *, envelope: bool) -> T:
    """
    Decode a response body into ``target``.

    With ``envelope`` set the body must be a successful v2 envelope, otherwise
    ``ProtocolError`` is raised. Malformed JSON and schema mismatches raise
    ``DecodeError`` naming the offending fields.
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodeError(_type_name(target), [("<body>", f"invalid JSON: {e}")]) from e

    if envelope:
        payload = _unwrap_envelope(payload)

    try:
        return _adapter(target).validate_python(payload)
    except pydantic.ValidationError as e:
        errors = [
            (".".join(str(part) for part in error["loc"]) or "<root>", error["msg"])
            for error in e.errors()
        ]
        raise DecodeError(e.title, errors) from e
