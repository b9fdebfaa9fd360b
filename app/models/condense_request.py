from typing import Any

from pydantic import BaseModel, Field


class CondenseRequest(BaseModel):
    data: Any = Field(description="Any JSON value: object, array, or primitive.")
    preserve_key_order: bool = Field(
        default=False,
        description="Treat objects whose keys differ only in order as different shapes.",
    )


class CondenseTextRequest(BaseModel):
    json_text: str = Field(
        alias="json",
        description="Raw JSON text to parse and condense.",
        examples=['{"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]}'],
    )
    preserve_key_order: bool = False
    indent: int | None = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation of the returned JSON text; null for compact output.",
    )
