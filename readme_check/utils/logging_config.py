"""
Logging Configuration

Sets up the root logger for readme-check runs: a stderr console handler
whose format gains the logger name at debug level, and an optional rotating
log file. Also reports how long each check took.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingConfig:
    """Owns the handlers readme-check installs on the root logger.

    Reconfiguring replaces only those handlers, so handlers added by a host
    application or test runner are left alone.
    """

    def __init__(self):
        self._configured = False
        self._handlers = []

    def configure_logging(
        self,
        level: str = "info",
        log_file: Optional[str] = None,
        force: bool = False,
    ) -> None:
        """
        Configure logging for a run.

        Args:
            level: Logging level (debug, info, warning, error). Unknown names fall back to info.
            log_file: Optional log file, rotated at 10MB with 5 backups
            force: Replace an earlier configuration instead of keeping it
        """
        if self._configured and not force:
            return

        log_level = LEVELS.get(level.lower(), logging.INFO)
        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        for handler in self._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self._handlers = []

        console = logging.StreamHandler(sys.stderr)
        if log_level == logging.DEBUG:
            console.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        else:
            console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self._install(console, log_level)

        if log_file:
            file_handler = self._open_log_file(log_file)
            if file_handler is not None:
                file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
                self._install(file_handler, log_level)

        self._configured = True
        logging.getLogger(__name__).debug(f"Logging configured: level={level}, file={log_file}")

    def log_operation_timing(self, operation: str, duration: float) -> None:
        """Log how long an operation took; sub-second timings only at debug."""
        logger = logging.getLogger(__name__)

        if duration < 1.0:
            logger.debug(f"{operation} completed in {duration*1000:.0f}ms")
        else:
            logger.info(f"{operation} completed in {duration:.1f}s")

    def _install(self, handler: logging.Handler, log_level: int) -> None:
        handler.setLevel(log_level)
        logging.getLogger().addHandler(handler)
        self._handlers.append(handler)

    def _open_log_file(self, log_file: str) -> Optional[logging.Handler]:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            return logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        except OSError as e:
            # Console logging still works without the file
            logging.getLogger(__name__).warning(f"Failed to setup log file {log_file}: {e}")
            return None


# Global logging configuration instance
logging_config = LoggingConfig()


def configure_logging(level: str = "info", log_file: Optional[str] = None, force: bool = False) -> None:
    """Configure the global LoggingConfig. See LoggingConfig.configure_logging."""
    logging_config.configure_logging(level=level, log_file=log_file, force=force)
