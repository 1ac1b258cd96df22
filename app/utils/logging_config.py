import logging
import logging.handlers
import time
from datetime import datetime
from pathlib import Path

from app.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'

# Component loggers that also get their own rotating file
COMPONENT_LOG_FILES = {
    'app.services.work_entry_service': "work_entry_service.log",
    'app.routers.work_entry_router': "requests.log",
}


def _rotating_handler(path: Path, level: int, max_bytes: int, backup_count: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(logs_dir: str = None, level: str = None) -> Path:
    """
    Configure logging for the work entry service.
    Console output plus rotating files for the app, each component and errors only.
    """
    settings = get_settings()
    logs_dir = Path(logs_dir or settings.logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    root_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers.clear()

    # Console handler (for container logs)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(root_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.addHandler(_rotating_handler(logs_dir / "app.log", root_level, 10*1024*1024, 5))

    for logger_name, file_name in COMPONENT_LOG_FILES.items():
        component_logger = logging.getLogger(logger_name)
        component_logger.handlers.clear()
        component_logger.addHandler(_rotating_handler(logs_dir / file_name, logging.DEBUG, 5*1024*1024, 3))
        component_logger.setLevel(logging.DEBUG)

    # Error-only log file for critical issues
    root_logger.addHandler(_rotating_handler(logs_dir / "errors.log", logging.ERROR, 5*1024*1024, 5))

    # Suppress noisy third-party loggers
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging configuration completed")
    logger.info(f"Log files will be saved to: {logs_dir.absolute()}")

    return logs_dir


def get_log_files_info(logs_dir: str = None):
    """
    Get information about current log files for debugging.
    """
    logs_dir = Path(logs_dir or get_settings().logs_dir)
    if not logs_dir.exists():
        return {"status": "No logs directory found"}

    log_files = {}
    for log_file in logs_dir.glob("*.log"):
        try:
            stat = log_file.stat()
            log_files[log_file.name] = {
                "size_mb": round(stat.st_size / (1024*1024), 2),
                "modified": datetime.fromtimestamp(stat.st_mtime).strftime("%Y-%m-%d %H:%M:%S")
            }
        except OSError as e:
            log_files[log_file.name] = {"error": str(e)}

    return log_files


def cleanup_old_logs(days_to_keep=30, logs_dir: str = None):
    """
    Clean up log files older than specified days. Returns the removed file names.
    """
    logs_dir = Path(logs_dir or get_settings().logs_dir)
    if not logs_dir.exists():
        return []

    cutoff_time = time.time() - (days_to_keep * 24 * 60 * 60)

    cleaned_files = []
    for log_file in logs_dir.glob("*.log*"):
        try:
            if log_file.stat().st_mtime < cutoff_time:
                log_file.unlink()
                cleaned_files.append(log_file.name)
        except OSError as e:
            logging.getLogger(__name__).warning(f"Failed to clean up {log_file}: {e}")

    if cleaned_files:
        logging.getLogger(__name__).info(f"Cleaned up old log files: {cleaned_files}")
    return cleaned_files
