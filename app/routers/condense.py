import json
import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.models.condense_request import CondenseRequest, CondenseTextRequest
from app.models.condense_response import CondenseResponse, CondenseStats, CondenseTextResponse
from app.services.condenser import condense
from app.services.stats import build_stats

logger = logging.getLogger(__name__)

# Raw JSON text accepted by /condense/text, in characters
MAX_PAYLOAD_CHARS = 5_000_000
RATE_LIMIT = "30/minute"

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/condense", tags=["Condense"])


@router.post(
    "",
    response_model=CondenseResponse,
    summary="Condense a JSON document by object shape",
    description=(
        "Walks the submitted JSON value and, inside every array, keeps only the "
        "first object of each distinct structure (same keys and nested types). "
        "Primitives, nested arrays and object keys are left untouched.\n\n"
        "Set `preserve_key_order` to treat `{\"a\": 1, \"b\": 2}` and "
        "`{\"b\": 2, \"a\": 1}` as different shapes."
    ),
)
@limiter.limit(RATE_LIMIT)
async def condense_json(request: Request, body: CondenseRequest) -> JSONResponse:
    logger.info(
        "Condense request received",
        extra={"preserve_key_order": body.preserve_key_order, "kind": type(body.data).__name__},
    )

    condensed = _condense_or_422(body.data, body.preserve_key_order)
    stats = build_stats(body.data, condensed)
    return _render_condensed(condensed, stats)


@router.post(
    "/text",
    response_model=CondenseTextResponse,
    summary="Parse, condense and re-serialize raw JSON text",
    description=(
        "Same as `POST /condense`, but takes the document as raw JSON text and "
        "returns the condensed document as text formatted with `indent`.  "
        "Invalid JSON is reported with the line and column of the error."
    ),
)
@limiter.limit(RATE_LIMIT)
async def condense_json_text(request: Request, body: CondenseTextRequest) -> CondenseTextResponse:
    """Parse *json*, condense it and return the serialized result."""
    logger.info(
        "Condense text request received",
        extra={"chars": len(body.json_text), "preserve_key_order": body.preserve_key_order},
    )

    if len(body.json_text) > MAX_PAYLOAD_CHARS:
        logger.warning("Rejected oversized payload: %d chars", len(body.json_text))
        raise HTTPException(
            status_code=413,
            detail=f"Payload exceeds the maximum of {MAX_PAYLOAD_CHARS} characters.",
        )

    data = _parse_json(body.json_text)
    condensed = _condense_or_422(data, body.preserve_key_order)

    return CondenseTextResponse(
        json=_dump_json(condensed, body.indent),
        stats=build_stats(data, condensed),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_json(text: str) -> Any:
    """Decode *text* and propagate parse errors as HTTP exceptions."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        logger.warning("Invalid JSON input: %s", exc)
        raise HTTPException(
            status_code=400,
            detail=f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno}).",
        )
    except ValueError as exc:
        logger.warning("Invalid JSON input: %s", exc)
        raise HTTPException(status_code=400, detail=f"Invalid JSON: {exc}.")
    except RecursionError:
        logger.warning("JSON input nested too deeply to parse")
        raise HTTPException(status_code=422, detail="JSON document is nested too deeply.")


def _condense_or_422(data: Any, preserve_key_order: bool) -> Any:
    try:
        return condense(data, preserve_key_order=preserve_key_order)
    except RecursionError:
        logger.warning("JSON document nested too deeply to condense")
        raise HTTPException(status_code=422, detail="JSON document is nested too deeply.")


def _render_condensed(condensed: Any, stats: CondenseStats) -> JSONResponse:
    """Serialize a :class:`CondenseResponse` body with the ``json`` encoder.

    pydantic-core refuses ``Any`` values nested deeper than its own serializer
    limit, well below what :func:`condense` handles, so the body is rendered
    here instead of through ``response_model``.
    """
    try:
        return JSONResponse(content={"data": condensed, "stats": stats.model_dump()})
    except RecursionError:
        logger.warning("Condensed document nested too deeply to serialize")
        raise HTTPException(status_code=422, detail="JSON document is nested too deeply.")
    except ValueError as exc:
        # NaN and Infinity have no JSON representation
        logger.warning("Condensed document is not serializable: %s", exc)
        raise HTTPException(status_code=422, detail=f"JSON document cannot be serialized: {exc}.")


def _dump_json(value: Any, indent: int | None) -> str:
    if indent is None:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(value, ensure_ascii=False, indent=indent)
