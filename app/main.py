import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.routers.condense import MAX_PAYLOAD_CHARS, RATE_LIMIT, limiter, router as condense_router

SERVICE_NAME = "json-condenser"
VERSION = "1.0.0"

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "service": "' + SERVICE_NAME + '", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "loggers": {
            # one line per condense request
            "app.routers.condense": {"level": "INFO"},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="JSON Condenser API",
    description=(
        "Shrinks repetitive JSON payloads to a structural skeleton by keeping "
        "one example of every distinct object shape in each array."
    ),
    version=VERSION,
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s %s", request.method, request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(condense_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {
        "message": "Hello from JSON Condenser",
        "service": SERVICE_NAME,
        "version": VERSION,
        "rate_limit": RATE_LIMIT,
        "max_payload_chars": MAX_PAYLOAD_CHARS,
    }
