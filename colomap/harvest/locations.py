"""Decoding of the per-site geographic locations document."""

from __future__ import annotations

import json
import math

from colomap.common.errors import DecodeError
from colomap.common.http import HttpClient
from colomap.common.models import LocationRecord


def _string_field(item: dict, key: str, idx: int) -> str:
    value = item.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"locations[{idx}].{key}: expected string, got {type(value).__name__}")
    return value


def _number_field(item: dict, key: str, idx: int) -> float:
    value = item.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"locations[{idx}].{key}: expected number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise DecodeError(f"locations[{idx}].{key}: number out of range") from exc
    if not math.isfinite(number):
        raise DecodeError(f"locations[{idx}].{key}: number out of range")
    return number


def _reject_constant(name: str):
    raise DecodeError(f"Invalid locations JSON: non-standard constant {name}")


def decode_locations(body: bytes | str) -> list[LocationRecord]:
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as exc:
        raise DecodeError(f"Invalid locations JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise DecodeError(f"locations: expected array, got {type(payload).__name__}")

    locations: list[LocationRecord] = []
    for idx, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DecodeError(f"locations[{idx}]: expected object, got {type(item).__name__}")
        locations.append(
            LocationRecord(
                code=_string_field(item, "iata", idx),
                latitude=_number_field(item, "lat", idx),
                longitude=_number_field(item, "lon", idx),
                country_code=_string_field(item, "cca2", idx),
                region=_string_field(item, "region", idx),
                city=_string_field(item, "city", idx),
            )
        )
    return locations


def fetch_locations(client: HttpClient, url: str) -> list[LocationRecord]:
    body = client.get_bytes(url)
    return decode_locations(body)
