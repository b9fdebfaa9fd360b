"""Size statistics comparing a document before and after condensation."""

import json
from typing import Any

from app.models.condense_response import CondenseStats


def count_array_elements(value: Any) -> int:
    """Return the total number of array elements in *value*, at every depth."""
    if isinstance(value, list):
        return len(value) + sum(count_array_elements(item) for item in value)
    if isinstance(value, dict):
        return sum(count_array_elements(item) for item in value.values())
    return 0


def compact_length(value: Any) -> int:
    """Length of the compact JSON serialization of *value*."""
    return len(json.dumps(value, ensure_ascii=False, separators=(",", ":")))


def build_stats(original: Any, condensed: Any) -> CondenseStats:
    before = count_array_elements(original)
    after = count_array_elements(condensed)
    original_chars = compact_length(original)
    condensed_chars = compact_length(condensed)

    reduction = 0.0
    if original_chars:
        reduction = round((original_chars - condensed_chars) / original_chars * 100, 2)

    return CondenseStats(
        elements_before=before,
        elements_after=after,
        elements_removed=before - after,
        original_chars=original_chars,
        condensed_chars=condensed_chars,
        reduction_percent=reduction,
    )
