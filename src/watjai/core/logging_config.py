"""
Logging configuration for ECG result presentation
"""

import functools
import logging
import logging.handlers
from typing import Optional
from .constants import LOG_BACKUP_COUNT, LOG_ROTATION_SIZE


class ECGLogger:
    """Centralized logging for the results screen"""

    def __init__(self, name: str = "watjai", log_file: Optional[str] = None,
                 level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.log_file = log_file
        self.level = level
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Setup logger with console and optional rotating file handlers"""
        # Re-configuring the same name must not stack handlers
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.setLevel(self.level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.level)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if self.log_file:
            try:
                file_handler = logging.handlers.RotatingFileHandler(
                    self.log_file,
                    maxBytes=LOG_ROTATION_SIZE,
                    backupCount=LOG_BACKUP_COUNT,
                    encoding='utf-8'
                )
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)
            except OSError as e:
                self.logger.warning(f"Could not setup file logging: {e}")


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> ECGLogger:
    """Configure the package root logger; child loggers propagate to it"""
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    return ECGLogger("watjai", log_file=log_file, level=numeric_level)


def get_logger(name: str = "watjai") -> logging.Logger:
    """Get a module logger under the package namespace"""
    return logging.getLogger(name)


def log_function_call(func):
    """Decorator to log function calls at DEBUG level"""
    logger = get_logger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug(f"Calling {func.__name__}")
        try:
            result = func(*args, **kwargs)
            logger.debug(f"{func.__name__} completed successfully")
            return result
        except Exception as e:
            logger.debug(f"{func.__name__} failed with error: {e}")
            raise
    return wrapper
