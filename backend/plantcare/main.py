import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from plantcare.config import get_settings
from plantcare.database import Base, SessionLocal, engine, get_db
from plantcare.errors import PlantCareError
from plantcare.routers import (
    care_logs_router, care_reminders_router, locations_router, plants_router, species_router,
)
from plantcare.schemas import HealthResponse
from plantcare.seed.seed_data import seed_database

settings = get_settings()
logger = logging.getLogger("plantcare")
logging.basicConfig(level=settings.log_level.upper())

# Rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.default_rate_limit],
    enabled=settings.rate_limit_enabled,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed the default catalogs on startup."""
    if settings.create_tables:
        Base.metadata.create_all(bind=engine)
    if settings.seed_on_startup:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()
    logger.info(f"Plant care API started ({settings.app_env})")
    yield


app = FastAPI(
    title="Plant Care API",
    description="Houseplant registry with species and locations catalogs, care reminders and care logs",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)


def _json(data: dict[str, Any]) -> str:
    return json.dumps(data, default=str)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Set basic security headers for all API responses."""
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Permissions-Policy"] = "camera=(), microphone=(), geolocation=()"
    return response


@app.middleware("http")
async def structured_logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    req_id = request.headers.get("X-Request-ID", str(uuid4()))
    request.state.request_id = req_id

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-ID"] = req_id
        return response
    finally:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(_json({
            "request_id": req_id,
            "path": request.url.path,
            "method": request.method,
            "status": status_code,
            "duration_ms": duration_ms,
        }))


@app.exception_handler(PlantCareError)
async def plant_care_error_handler(request: Request, exc: PlantCareError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report schema failures as 400 with one readable message per field."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value").removeprefix("Value error, ")
        messages.append(f"{location}: {message}" if location else message)
    return JSONResponse(status_code=400, content={"detail": "; ".join(messages)})


if settings.enable_metrics:
    Instrumentator().instrument(app).expose(app, include_in_schema=False, should_gzip=True)

app.include_router(species_router)
app.include_router(locations_router)
app.include_router(plants_router)
app.include_router(care_reminders_router)
app.include_router(care_logs_router)


@app.get("/health", response_model=HealthResponse)
def health(db: Session = Depends(get_db)):
    """Liveness check; answers 503 when the database is unreachable."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check database ping failed")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=HealthResponse(status="degraded", database="error", timestamp=timestamp).model_dump(),
        )
    return HealthResponse(status="ok", database="ok", timestamp=timestamp)


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": "Plant Care API",
        "version": "1.0.0",
        "docs": "/docs",
        "resources": ["/species", "/locations", "/plants", "/care-reminders", "/care-logs"],
    }
