"""Decode Nominatim search responses into Place records."""

from __future__ import annotations

import json
from typing import Any, List

from domain.models import Place
from services.errors import PlaceDecodeError

PLACE_FIELDS = ("display_name", "osm_type", "type")


def _field_text(item: dict, name: str) -> str:
    value = item.get(name)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise PlaceDecodeError(f"field {name!r} is not a scalar")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def decode_places(text: str) -> List[Place]:
    """
    Parse a JSON array of objects into places.

    Unknown keys are ignored and missing ones become empty strings. Anything
    that is not an array of objects raises PlaceDecodeError.
    """
    try:
        data: Any = json.loads(text)
    except ValueError as exc:
        raise PlaceDecodeError(f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise PlaceDecodeError(f"expected a JSON array, got {type(data).__name__}")

    places: List[Place] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise PlaceDecodeError(f"element {index} is not an object")
        places.append(Place(**{name: _field_text(item, name) for name in PLACE_FIELDS}))
    return places
