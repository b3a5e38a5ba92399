import logging
import sys
from pathlib import Path

_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(message)s"


class Log:
    """Centralized logging for the watcher, worker threads and pipeline."""

    _logger: logging.Logger = logging.getLogger("inbox_renamer")

    @classmethod
    def configure(cls, log_level: str, log_file: Path | None = None) -> None:
        """Configure the logger level, a stdout handler and an optional file handler."""
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        formatter = logging.Formatter(_FORMAT)
        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        for handler in handlers:
            handler.setFormatter(formatter)
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def exception(cls, message: str) -> None:
        """Log an error together with the traceback of the exception being handled."""
        cls._logger.exception(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)
