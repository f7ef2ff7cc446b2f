import logging
import os
from logging.handlers import RotatingFileHandler
from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

class LoggerConfig:
    """
    Application logger: console output plus a rotating file under
    `log_directory`. An empty directory disables the file handler.
    """
    def __init__(self, level=20, logger_name="PLACES-API", log_directory="logs", log_file="app.log"):
        self.level = level
        self.logger = logging.getLogger(logger_name)
        self.log_file_path = None
        if log_directory:
            self.log_file_path = os.path.join(os.path.abspath(log_directory), log_file)
        self.setup_logger()

    def _handlers(self) -> list[logging.Handler]:
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if self.log_file_path:
            try:
                os.makedirs(os.path.dirname(self.log_file_path), exist_ok=True)
                handlers.append(RotatingFileHandler(
                    self.log_file_path, backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
                ))
            except OSError as e:
                # Console logging still works without the file
                print(f"Failed to open log file {self.log_file_path}: {e}")
        return handlers

    def setup_logger(self):
        # Avoid adding duplicate handlers if re-initialized
        if not self.logger.handlers:
            formatter = logging.Formatter(LOG_FORMAT)
            for handler in self._handlers():
                handler.setLevel(self.level)
                handler.setFormatter(formatter)
                self.logger.addHandler(handler)
        self.logger.setLevel(self.level)

    def log(self, level: int, message: str, extra: dict = None, exc_info=None):
        """Simple wrapper to log messages"""
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, message, exc_info=exc_info)

# Initialize Logger
logs = LoggerConfig(
    level=settings.LOGGER,
    logger_name="PLACES-API",
    log_directory=settings.LOG_DIRECTORY,
)
