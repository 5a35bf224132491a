"""Runtime support: logging setup, timing and environment checks."""
import os
import sys
import time
import functools
from pathlib import Path
from typing import Optional
from loguru import logger

from settings import Settings, load_settings


class PerformanceMonitor:
    """Monitor execution time."""

    @staticmethod
    def measure_time(func):
        """Decorator to measure execution time."""
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                duration = time.time() - start_time
                logger.debug(f"Performance: {func.__name__} took {duration:.4f}s")
                return result
            except Exception as e:
                duration = time.time() - start_time
                logger.error(f"Performance: {func.__name__} failed after {duration:.4f}s: {str(e)}")
                raise
        return wrapper


def _rotate_logs_on_startup(log_file: Path):
    """Move the previous run's log aside, truncating it if the move fails."""
    backup_file = log_file.with_name(log_file.name + ".bak")

    if log_file.exists():
        try:
            if backup_file.exists():
                backup_file.unlink()

            log_file.rename(backup_file)
            logger.debug("Log file rotated on startup")

        except (OSError, PermissionError) as e:
            # File in use (Windows) or read-only directory
            try:
                with open(log_file, 'w') as f:
                    f.write(f"# Log rotated/truncated due to error: {str(e)}\n")
                logger.debug("Log file truncated (rotation failed due to file in use)")
            except OSError as truncate_e:
                logger.warning(f"Could not rotate or truncate log file: {str(e)}, {str(truncate_e)}")


def setup_logging(settings: Optional[Settings] = None) -> Path:
    """Configure loguru sinks: rotated log file plus stderr console.

    Returns:
        Path: Log file in use
    """
    if settings is None:
        settings = load_settings()
    log_file = Path(settings.log_file)

    logger.remove()
    _rotate_logs_on_startup(log_file)

    logger.add(str(log_file), rotation="10 MB", retention="7 days", level=settings.log_level)
    logger.add(sys.stderr, level=settings.console_log_level,
               format="<level>{level: <8}</level> | {message}")

    logger.info(f"Logging to {log_file} at {settings.log_level}")
    return log_file


def validate_system_configuration(settings: Optional[Settings] = None) -> dict:
    """Check the log directory and numeric dependencies."""
    if settings is None:
        settings = load_settings()
    status = {'valid': True, 'checks': []}

    log_dir = Path(settings.log_file).resolve().parent
    if not log_dir.exists():
        status['valid'] = False
        status['checks'].append(f"✗ Log directory {log_dir} does not exist")
    elif not os.access(log_dir, os.W_OK):
        status['valid'] = False
        status['checks'].append(f"✗ Log directory {log_dir} is not writable")
    else:
        status['checks'].append(f"✓ Log directory {log_dir} is ready")

    try:
        import numpy
        status['checks'].append(f"✓ numpy {numpy.__version__} available")
    except ImportError:
        status['valid'] = False
        status['checks'].append("✗ numpy package missing")

    try:
        import matplotlib
        status['checks'].append(f"✓ matplotlib {matplotlib.__version__} available")
    except ImportError:
        status['valid'] = False
        status['checks'].append("✗ matplotlib package missing")

    return status
