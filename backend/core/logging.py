import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(settings: Settings) -> None:
    """Configure application-wide logging based on settings.

    The format includes timestamp, log level, logger name, and message.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)

    # Align uvicorn and SQLAlchemy loggers with the application log level.
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(level)
    # Engine SQL echo is noisy below WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(max(level, logging.WARNING))
