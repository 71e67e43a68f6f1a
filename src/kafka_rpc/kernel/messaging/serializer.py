"""Kernel messaging – payload serializer port and the JSON default."""
from __future__ import annotations

import abc
import dataclasses
import json
import types
import typing
from typing import Any, Generic, TypeVar, Union

from kafka_rpc.kernel.errors import DecodeError, SerializationError

T = TypeVar("T")

_SCALARS: tuple[type, ...] = (str, int, float, bool, dict, list)


class MessageSerializer(abc.ABC, Generic[T]):
    """Port: serialize / deserialize message payloads."""

    @abc.abstractmethod
    def serialize(self, payload: T) -> bytes: ...

    @abc.abstractmethod
    def deserialize(self, data: bytes, target_type: type[T]) -> T:
        """Decode *data* into *target_type*, raising :class:`DecodeError` on failure."""
        ...


class JsonMessageSerializer(MessageSerializer[Any]):
    """JSON serialiser/deserialiser.

    Dataclasses are rebuilt field by field (nested dataclasses and lists of
    them included); types exposing ``model_validate`` are delegated to it;
    ``dict``/``list``/``Any`` targets receive the parsed JSON as-is.
    """

    def serialize(self, payload: Any) -> bytes:
        if isinstance(payload, bytes):
            return payload
        if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
            payload = dataclasses.asdict(payload)
        elif hasattr(payload, "model_dump"):
            payload = payload.model_dump(mode="json")
        try:
            return json.dumps(payload, default=str).encode()
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot serialize {type(payload).__name__}", cause=exc) from exc

    def deserialize(self, data: bytes, target_type: type[Any]) -> Any:
        try:
            parsed = json.loads(data)
        except (ValueError, RecursionError) as exc:
            raise DecodeError("Payload is not valid JSON", cause=exc) from exc
        if parsed is None:
            raise DecodeError("Payload is an empty JSON document")
        try:
            return _build(parsed, target_type)
        except DecodeError:
            raise
        except (TypeError, ValueError, KeyError, RecursionError) as exc:
            name = getattr(target_type, "__name__", repr(target_type))
            raise DecodeError(f"Payload does not match {name}", cause=exc) from exc


def _build(value: Any, target: Any) -> Any:  # noqa: PLR0911
    if target is None or target is Any or target is object:
        return value
    if hasattr(target, "model_validate"):
        return target.model_validate(value)
    if dataclasses.is_dataclass(target) and isinstance(target, type):
        if not isinstance(value, dict):
            raise DecodeError(f"Expected a JSON object for {target.__name__}")
        hints = typing.get_type_hints(target)
        kwargs = {
            f.name: _build(value[f.name], hints.get(f.name, Any))
            for f in dataclasses.fields(target)
            if f.init and f.name in value
        }
        return target(**kwargs)

    origin = typing.get_origin(target)
    args = typing.get_args(target)
    if origin is Union or origin is types.UnionType:
        if value is None and type(None) in args:
            return None
        candidates = [a for a in args if a is not type(None)]
        if len(candidates) == 1:
            return _build(value, candidates[0])
        return value
    if origin in (list, tuple, set, frozenset):
        if not isinstance(value, list):
            raise DecodeError(f"Expected a JSON array, got {type(value).__name__}")
        item = args[0] if args else Any
        return origin(_build(v, item) for v in value)
    if origin is dict:
        if not isinstance(value, dict):
            raise DecodeError(f"Expected a JSON object, got {type(value).__name__}")
        return value
    if target in _SCALARS:
        if target is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if not isinstance(value, target):
            raise DecodeError(f"Expected {target.__name__}, got {type(value).__name__}")
    return value


__all__ = ["JsonMessageSerializer", "MessageSerializer"]
