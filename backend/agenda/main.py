"""FastAPI application entrypoint.

Responsibilities kept minimal:
  * App / lifespan initialization (logging)
  * Router registration (agenda)
  * Cross-cutting concerns: metrics middleware & exception handlers
"""

from contextlib import asynccontextmanager
import logging
from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from .api.agenda import router as agenda_router
from .config import Settings, configure_logging, get_settings
from .errors import BaseAppException

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - simple startup path
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("agenda service starting (calendar=%s)", settings.calendar_id)
    yield


settings = get_settings()

app = FastAPI(title="Agenda API", version="0.1.0", lifespan=lifespan)

# --- Metrics setup ---
REQUEST_COUNT = Counter(
    "agenda_requests_total", "Total HTTP requests", ["method", "path", "status"]
)
REQUEST_LATENCY = Histogram(
    "agenda_request_latency_seconds", "Latency of HTTP requests", ["method", "path"]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(agenda_router)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    path = request.url.path
    method = request.method
    with REQUEST_LATENCY.labels(method=method, path=path).time():
        response: Response = await call_next(request)
    REQUEST_COUNT.labels(method=method, path=path, status=str(response.status_code)).inc()
    return response


@app.get("/metrics")
def metrics():  # pragma: no cover - external scrape
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    return JSONResponse(
        status_code=exc.http_status,
        content={"detail": {"code": exc.code, "message": exc.message}},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):  # pragma: no cover
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": {"code": "INTERNAL_ERROR", "message": "unexpected error"}},
    )


@app.get("/healthz")
async def health(current: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "calendarId": current.calendar_id,
        "provider": "google" if current.google_token_file else "unconfigured",
    }
