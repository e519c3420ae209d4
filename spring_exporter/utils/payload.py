"""Decoding of the endpoint's JSON body."""

import json
import math
from typing import List, Tuple

from .errors import PayloadParseError


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_payload(body: bytes) -> List[Tuple[str, float]]:
    """
    Parse a flat ``{"key": number}`` JSON object.

    Args:
        body: Raw response body

    Returns:
        List[Tuple[str, float]]: Key/value pairs in document order

    Raises:
        PayloadParseError: If the body is not valid JSON, is not an object,
            or holds a value that is not a number
    """
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as e:
        raise PayloadParseError(f"invalid JSON body: {e}") from e

    if not isinstance(data, dict):
        raise PayloadParseError(
            f"expected a JSON object, got {type(data).__name__}"
        )

    rows = []
    for key, value in data.items():
        # bool is an int subclass but true/false are not metric values
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PayloadParseError(
                f"value for key {key!r} is not a number: {value!r}"
            )
        try:
            number = float(value)
        except OverflowError as e:
            raise PayloadParseError(f"value for key {key!r} is out of range") from e
        if not math.isfinite(number):
            raise PayloadParseError(f"value for key {key!r} is out of range")
        rows.append((key, number))

    return rows
