from loguru import logger
import os

from hotel.core.config import LOG_DIR

LOG_FORMAT = "{time} | {level} | {extra[log_type]} | {message}"

# Per-concern sinks: file name -> log_type routed into it
CONCERN_SINKS = {
    "bookings.log": "booking",
    "payments.log": "payment",
    "admin.log": "admin",
}

_configured = False


def _only(log_type: str):
    return lambda record: record["extra"].get("log_type") == log_type


def setup_logging(log_dir: str = LOG_DIR):
    """Route loguru output into rotating files under ``log_dir``.

    Safe to call more than once; only the first call installs sinks.
    """
    global _configured
    if _configured:
        return logger

    os.makedirs(log_dir, exist_ok=True)

    logger.remove()
    logger.configure(extra={"log_type": "app"})

    # Everything at INFO and above
    logger.add(
        os.path.join(log_dir, "app.log"),
        rotation="1 week",
        retention="4 weeks",
        level="INFO",
        enqueue=True,
        format=LOG_FORMAT,
    )

    for filename, log_type in CONCERN_SINKS.items():
        logger.add(
            os.path.join(log_dir, filename),
            rotation="1 week",
            retention="4 weeks",
            level="INFO",
            enqueue=True,
            filter=_only(log_type),
            format=LOG_FORMAT,
        )

    # Persistence failures and unhandled errors
    logger.add(
        os.path.join(log_dir, "errors.log"),
        rotation="1 week",
        retention="8 weeks",
        level="ERROR",
        enqueue=True,
        format=LOG_FORMAT,
    )

    _configured = True
    return logger


def get_logger():
    return setup_logging()
