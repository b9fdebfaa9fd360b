"""Structural signatures for JSON values.

A signature describes the *shape* of a value (its nested types and object
keys) while ignoring primitive content, so that two values share a signature
exactly when they have the same structure::

    {"id": 1, "name": "Alice"}   ->  {"id":number,"name":string}
    [1, "a", None]               ->  array<number|string|null>

Object keys are written JSON-quoted, which keeps a key such as ``"a,b:c"``
from ever being mistaken for structural delimiters.
"""

import json
from typing import Any


def _primitive_token(value: Any) -> str:
    """Return the type-family token for a non-container value."""
    if value is None:
        return "null"
    # bool is a subclass of int and must be checked first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def structural_signature(value: Any, preserve_order: bool = False) -> str:
    """Return the structural signature of *value*.

    Args:
        value:          Any decoded JSON value.
        preserve_order: When True, object keys are compared in insertion
                        order; otherwise they are sorted first, so
                        ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}`` match.

    Array element order always contributes to the signature.
    """
    if isinstance(value, list):
        inner = "|".join(structural_signature(item, preserve_order) for item in value)
        return f"array<{inner}>"

    if isinstance(value, dict):
        keys = list(value) if preserve_order else sorted(value)
        nested = ",".join(
            f"{json.dumps(key)}:{structural_signature(value[key], preserve_order)}"
            for key in keys
        )
        return f"{{{nested}}}"

    return _primitive_token(value)
