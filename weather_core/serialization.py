"""Turn normalized records into the camelCase JSON shapes callers expect."""
from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from .entities import Point, ResolvedWeatherResult


def camelize(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_payload(value: Any) -> Any:
    """Recursively convert records to plain JSON types.

    ``None`` fields are dropped. A :class:`ResolvedWeatherResult` nested in a
    list (the panel query) becomes its data with a ``source`` key added.
    """
    if isinstance(value, ResolvedWeatherResult):
        payload = to_payload(value.data)
        if isinstance(payload, dict):
            payload["source"] = value.source
        return payload
    if isinstance(value, Point):
        return {"name": value.name, "state": value.state, "lat": value.latitude, "lon": value.longitude}
    if is_dataclass(value) and not isinstance(value, type):
        payload = {}
        for item in fields(value):
            attribute = getattr(value, item.name)
            if attribute is not None:
                payload[camelize(item.name)] = to_payload(attribute)
        return payload
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    if isinstance(value, dict):
        return {key: to_payload(item) for key, item in value.items()}
    if isinstance(value, Enum):
        return value.value
    return value


__all__ = ["camelize", "to_payload"]
