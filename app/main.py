from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from app.routers import work_entry_router
from app.database import init_db
from app.handlers.exception_handlers import register_exception_handlers
from app.utils.logging_config import setup_logging, get_log_files_info, cleanup_old_logs
from app.config import get_settings
import logging

# Setup comprehensive logging
logs_dir = setup_logging()
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Work Entry service...")
    init_db()
    cleanup_old_logs(days_to_keep=settings.log_retention_days)
    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Application stopped")


app = FastAPI(
    title="Work Ledger - Work Entries",
    description="Timesheet work entry tracking with a DRAFT -> SUBMITTED -> LOCKED lifecycle",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware. Credentials are not allowed with a wildcard origin.
_origins = settings.allowed_origins_list or ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials="*" not in _origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(work_entry_router.router)


@app.get("/")
async def root():
    return {
        "message": "Work Entry API",
        "status": "running",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "environment": settings.app_env
    }


@app.get("/logs/info")
async def logs_info():
    """Get information about current log files."""
    return {
        "logs_directory": str(logs_dir.absolute()),
        "log_files": get_log_files_info()
    }
