"""
JSON encoding and decoding of gradients.

Wire format::

    ColorMap:   {"id": str, "stops": [ColorStop, ...]}
    ColorStop:  {"id": str, "position": number, "type": "single" | "dual",
                 "firstColor": Color, "secondColor"?: Color}
    Color:      {"red": number, "green": number, "blue": number, "alpha": number}
    Scheme:     {"id": str, "name": str, "description": str, "colorMap": ColorMap}

``secondColor`` is present exactly when ``type`` is ``"dual"``. Decoding is
all-or-nothing: any malformed field raises :class:`DecodeError` and no partial
value is returned. Floats are written with ``repr`` precision, so values
survive a round-trip unchanged.
"""
from __future__ import annotations
import json
import logging
import math
from typing import Any, Dict, Mapping, Optional, Union

from .colors.color import ColorRGBA
from .errors import DecodeError, EncodeError
from .models.color_map import ColorMap
from .models.color_stop import ColorStop
from .models.color_stop_type import ColorStopType, Dual, Single
from .models.scheme import GradientColorScheme
from .types.color_types import COLOR_COMPONENTS

logger = logging.getLogger(__name__)

JSONText = Union[str, bytes, bytearray]


# ===================== Encoding =====================

def encode_color(color: Any, path: str = "color") -> Dict[str, float]:
    if not isinstance(color, ColorRGBA):
        raise EncodeError(f"expected ColorRGBA, got {type(color).__name__}", path=path)
    components = color.value
    if len(components) != len(COLOR_COMPONENTS):
        raise EncodeError(f"color has {len(components)} components, expected 4", path=path)
    if not color.is_finite:
        raise EncodeError(f"color components must be finite, got {components}", path=path)
    return dict(zip(COLOR_COMPONENTS, components))


def encode_stop_type(stop_type: ColorStopType, path: str = "") -> Dict[str, Any]:
    prefix = f"{path}." if path else ""
    if isinstance(stop_type, Single):
        return {
            "type": stop_type.encoding_name,
            "firstColor": encode_color(stop_type.color, f"{prefix}firstColor"),
        }
    if isinstance(stop_type, Dual):
        return {
            "type": stop_type.encoding_name,
            "firstColor": encode_color(stop_type.color_a, f"{prefix}firstColor"),
            "secondColor": encode_color(stop_type.color_b, f"{prefix}secondColor"),
        }
    raise EncodeError(f"unsupported color stop type {type(stop_type).__name__}", path=path or "type")


def encode_color_stop(stop: ColorStop, path: str = "stop") -> Dict[str, Any]:
    if not math.isfinite(stop.position):
        raise EncodeError(f"position must be finite, got {stop.position!r}", path=f"{path}.position")
    payload: Dict[str, Any] = {"id": stop.id, "position": stop.position}
    payload.update(encode_stop_type(stop.type, path))
    return payload


def encode_color_map(color_map: ColorMap) -> Dict[str, Any]:
    return {
        "id": color_map.id,
        "stops": [encode_color_stop(stop, f"stops[{i}]") for i, stop in enumerate(color_map.stops)],
    }


def encode_scheme(scheme: GradientColorScheme) -> Dict[str, Any]:
    return {
        "id": scheme.id,
        "name": scheme.name,
        "description": scheme.description,
        "colorMap": encode_color_map(scheme.color_map),
    }


# ===================== Decoding helpers =====================

def _require_object(payload: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise DecodeError(f"expected an object, got {type(payload).__name__}", path=path)
    return payload


def _require(payload: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in payload:
        raise DecodeError(f"missing required key {key!r}", path=path)
    return payload[key]


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _require_str(payload: Mapping[str, Any], key: str, path: str) -> str:
    value = _require(payload, key, path)
    if not isinstance(value, str):
        raise DecodeError(f"expected a string, got {type(value).__name__}", path=_join(path, key))
    return value


def _require_number(payload: Mapping[str, Any], key: str, path: str) -> float:
    value = _require(payload, key, path)
    # bool is an int subclass, but true/false are not numbers on the wire
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"expected a number, got {type(value).__name__}", path=_join(path, key))
    try:
        number = float(value)
    except OverflowError:
        raise DecodeError("number is too large", path=_join(path, key)) from None
    if not math.isfinite(number):
        raise DecodeError(f"number must be finite, got {number!r}", path=_join(path, key))
    return number


# ===================== Decoding =====================

def decode_color(payload: Any, path: str = "color") -> ColorRGBA:
    obj = _require_object(payload, path)
    return ColorRGBA(tuple(_require_number(obj, name, path) for name in COLOR_COMPONENTS))


def decode_stop_type(payload: Any, path: str = "") -> ColorStopType:
    obj = _require_object(payload, path or "stop")
    encoding_name = _require_str(obj, "type", path)
    first = decode_color(_require(obj, "firstColor", path), _join(path, "firstColor"))
    second_payload = obj.get("secondColor")
    second: Optional[ColorRGBA] = None
    if second_payload is not None:
        second = decode_color(second_payload, _join(path, "secondColor"))
    try:
        return ColorStopType.from_encoding(encoding_name, first, second)
    except DecodeError as exc:
        raise DecodeError(exc.reason, path=_join(path, exc.path or "type")) from None


def decode_color_stop(payload: Any, path: str = "stop") -> ColorStop:
    obj = _require_object(payload, path)
    stop_id = _require_str(obj, "id", path)
    position = _require_number(obj, "position", path)
    stop_type = decode_stop_type(obj, path)
    return ColorStop.create(position, stop_type, id=stop_id)


def decode_color_map(payload: Any, path: str = "") -> ColorMap:
    obj = _require_object(payload, path or "colorMap")
    map_id = _require_str(obj, "id", path)
    stops_payload = _require(obj, "stops", path)
    if not isinstance(stops_payload, list):
        raise DecodeError(f"expected a list, got {type(stops_payload).__name__}", path=_join(path, "stops"))
    stops = [
        decode_color_stop(item, f"{_join(path, 'stops')}[{i}]")
        for i, item in enumerate(stops_payload)
    ]
    return ColorMap.create(stops, id=map_id)


def decode_scheme(payload: Any) -> GradientColorScheme:
    obj = _require_object(payload, "scheme")
    return GradientColorScheme(
        name=_require_str(obj, "name", "scheme"),
        description=_require_str(obj, "description", "scheme"),
        color_map=decode_color_map(_require(obj, "colorMap", "scheme"), "colorMap"),
        id=_require_str(obj, "id", "scheme"),
    )


# ===================== Text =====================

def _parse(data: JSONText) -> Any:
    try:
        return json.loads(data)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, UnicodeDecodeError and the int digit limit
        logger.debug("Rejected gradient payload: %s", exc)
        raise DecodeError(f"invalid JSON: {exc}") from exc


def dumps(color_map: ColorMap, indent: Optional[int] = None) -> str:
    """
    Serialize a color map to JSON text.

    Raises:
        EncodeError: a stop or color cannot be represented
    """
    return json.dumps(encode_color_map(color_map), indent=indent, allow_nan=False)


def loads(data: JSONText) -> ColorMap:
    """
    Parse a color map from JSON text.

    Raises:
        DecodeError: the text is not valid JSON or does not describe a color map
    """
    try:
        return decode_color_map(_parse(data))
    except DecodeError as exc:
        logger.debug("Failed to decode color map: %s", exc)
        raise


def dumps_scheme(scheme: GradientColorScheme, indent: Optional[int] = None) -> str:
    return json.dumps(encode_scheme(scheme), indent=indent, allow_nan=False)


def loads_scheme(data: JSONText) -> GradientColorScheme:
    try:
        return decode_scheme(_parse(data))
    except DecodeError as exc:
        logger.debug("Failed to decode gradient scheme: %s", exc)
        raise


__all__ = [
    "encode_color",
    "encode_stop_type",
    "encode_color_stop",
    "encode_color_map",
    "encode_scheme",
    "decode_color",
    "decode_stop_type",
    "decode_color_stop",
    "decode_color_map",
    "decode_scheme",
    "dumps",
    "loads",
    "dumps_scheme",
    "loads_scheme",
]
