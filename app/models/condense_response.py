from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CondenseStats(BaseModel):
    """Size of the document before and after condensation."""

    elements_before: int
    elements_after: int
    elements_removed: int
    original_chars: int
    condensed_chars: int
    reduction_percent: float


class CondenseResponse(BaseModel):
    data: Any
    stats: CondenseStats


class CondenseTextResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    json_text: str = Field(alias="json")
    stats: CondenseStats
