"""
Assessment Report API — FastAPI Application

This is the entry point for the backend. It:
1. Creates the FastAPI app instance
2. Configures CORS (so the frontend can talk to us)
3. Registers route handlers and error handlers
4. Sets up startup/shutdown lifecycle events

Run with:
    uvicorn assessment_api.main:app --reload --port 5000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from assessment_api.config import settings
from assessment_api.database import AsyncSessionLocal, init_db
from assessment_api.logging_config import get_logger, setup_logging
from assessment_api.routers import auth, reports
from assessment_api.schemas.reports import HealthResponse
from assessment_api.services.storage import get_storage_service

# Import models so SQLAlchemy registers them with Base.metadata
# before init_db() calls create_all().
import assessment_api.models  # noqa: F401

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic."""
    setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
    await init_db()
    storage = get_storage_service()
    logger.info(
        "api_started",
        environment=settings.APP_ENV,
        reports_dir=str(storage.base_path.resolve()),
    )

    yield

    logger.info("api_stopped")


app = FastAPI(
    title="Assessment Report API",
    description="Configuration-driven PDF reports for assessment sessions",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(reports.router)


# --- Error handlers ---
# Every error body has the same shape: {"message": "..."}

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg", message)
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", path=request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# --- Health Check Endpoints ---

@app.get("/", tags=["health"])
async def root():
    """Root endpoint — confirms the API is alive."""
    return {
        "service": "Assessment Report API",
        "status": "running",
        "version": "1.0.0",
    }


@app.get("/api/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Health probe, including database connectivity."""
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {str(e)}"

    return HealthResponse(
        status="OK" if db_status == "connected" else "DEGRADED",
        message="Assessment Management System API is running",
        database=db_status,
    )
