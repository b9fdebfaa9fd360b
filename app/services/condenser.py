"""Shape-based condensation of JSON documents.

Arrays of objects in API payloads tend to repeat the same structure over and
over.  :func:`condense` keeps the first object of every distinct shape in each
array and drops the rest, producing a compact skeleton that still contains
one example of every structure present in the original document.
"""

from typing import Any, List

from app.services.signature import structural_signature


def condense(data: Any, preserve_key_order: bool = False) -> Any:
    """Return a condensed copy of *data*.

    Within every array, an object element is kept only if no earlier object
    in the *same* array had the same structural signature.  Primitives and
    nested arrays are always kept (nested arrays are condensed on their own).
    Object keys are never added, removed or reordered.

    The input is never mutated; every container in the result is new.

    Args:
        data:               A decoded JSON value.
        preserve_key_order: Treat objects whose keys differ only in order as
                            distinct shapes.
    """
    if isinstance(data, list):
        return _condense_array(data, preserve_key_order)

    if isinstance(data, dict):
        return {key: condense(value, preserve_key_order) for key, value in data.items()}

    return data


def _condense_array(items: List[Any], preserve_key_order: bool) -> List[Any]:
    """Condense one array, deduplicating its object elements by shape."""
    seen: set[str] = set()
    result: List[Any] = []

    for item in items:
        if isinstance(item, dict):
            signature = structural_signature(item, preserve_key_order)
            if signature in seen:
                continue
            seen.add(signature)
        result.append(condense(item, preserve_key_order))

    return result

