"""
Task Service - Main application module.
"""
import logging
import time
from typing import Dict, Any
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import get_settings
from .core.database import init_db, check_db_connection
from .core.exceptions import TaskServiceError
from .routers import tasks

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Task Service",
    description="Owner-scoped task management with bearer authentication",
    version=settings.service_version
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    tasks.router,
    prefix=settings.api_prefix + "/tasks",
    tags=["tasks"]
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log all requests with timing"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    response.headers["X-Process-Time"] = str(process_time)

    if request.url.path != "/health":
        logger.info(f"{request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

    return response


@app.exception_handler(TaskServiceError)
async def task_service_exception_handler(request: Request, exc: TaskServiceError):
    """Map service errors to their HTTP status"""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc) if settings.debug else "Internal server error"}
    )


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info(f"Starting Task Service ({settings.task_store_backend} store)...")
    if settings.task_store_backend == "sql":
        if init_db():
            logger.info("Database initialized successfully")
        else:
            logger.error("Database initialization failed")
    logger.info("Task Service startup completed")


@app.get("/")
async def root() -> Dict[str, Any]:
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "running",
        "message": "Task Service is operational"
    }


@app.get("/health")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint"""
    if settings.task_store_backend == "memory":
        db_healthy = True
        database = "not used"
    else:
        db_healthy = check_db_connection()
        database = "connected" if db_healthy else "disconnected"

    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "healthy" if db_healthy else "unhealthy",
        "database": database,
        "timestamp": time.time()
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "task_service.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
