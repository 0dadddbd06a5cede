# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""Positional parameter lists for JSON-RPC calls."""

# Load standard packages
from collections.abc import Mapping, Sequence
from typing import Any
import binascii


def build_params(*args: Any) -> list[Any]:
    """Assemble positional parameters, skipping absent (None) values.

    Absent values at the end are dropped. An absent value followed by a present
    one becomes null so that later parameters keep their positions.
    """
    params = [to_json(a) for a in args]
    while params and params[-1] is None:
        params.pop()
    return params


def to_json(value: Any) -> Any:
    """Convert containers to plain JSON lists and objects, bytes to hex."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return binascii.b2a_hex(value).decode('ascii')
    if isinstance(value, Mapping):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, Sequence):
        return [to_json(v) for v in value]
    return value
