"""
FastAPI application entry point for the Job Portal API.

This is the main app that:
- Initializes FastAPI with CORS and request logging
- Registers the jobs and job-applications routers
- Opens the MongoDB connection for the process lifetime
- Turns uncaught errors into a generic 500 response
"""
import logging
import sys
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from job_portal.config import ConfigurationError, settings
from job_portal.database import Database
# Import API routers
from job_portal.api import applications, jobs

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Missing MongoDB credentials in environment variables."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    On startup: Connect to MongoDB and verify it answers a ping
    On shutdown: Close the client
    """
    # Startup
    logger.info("🚀 Starting Job Portal API...")
    logger.info(f"📊 Database: {settings.db_host}/{settings.db_name}")
    logger.info(f"🔧 Debug mode: {settings.debug}")

    try:
        database = Database.from_settings(settings)
    except ConfigurationError:
        logger.error(MISSING_CREDENTIALS)
        raise

    try:
        await database.ping()
    except Exception:
        logger.exception("Could not reach MongoDB")
        database.close()
        raise
    app.state.database = database

    yield

    # Shutdown
    logger.info("👋 Shutting down Job Portal API...")
    database.close()


# Initialize FastAPI app
app = FastAPI(
    title="Job Portal API",
    description="Job postings and job applications backed by MongoDB",
    version="1.0.0",
    lifespan=lifespan,
)


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log anything a handler did not convert and return a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    content = {"detail": "Something went wrong!"}
    # Raw error text is internal detail; only expose it while debugging
    if settings.debug:
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """One line per request: method, path, status and duration."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        # Converted inside CORSMiddleware so the 500 gets CORS headers too
        response = unhandled_error_response(request, exc)
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f} ms")
    return response


# Configure CORS (added last so it wraps everything else)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


# Root endpoint
@app.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness message, independent of database state."""
    return "Job portal server is running!"


# Health check endpoint
@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {"status": "healthy"}


# Register API routers
app.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
app.include_router(applications.router, prefix="/job-applications", tags=["job-applications"])


def run():
    """Console entry point: refuse to start without credentials, then serve."""
    import uvicorn

    if not settings.has_credentials():
        logger.error(MISSING_CREDENTIALS)
        sys.exit(1)

    logger.info(f"Server running at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    run()
