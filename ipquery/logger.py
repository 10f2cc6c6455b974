import os
from logging import config, getLevelName, getLogger
from typing import Any

LOGGER_NAME = "ipquery"
LOG_LEVEL = getLevelName(os.getenv("LOG_LEVEL", "INFO"))  # DEBUG, WARNING, ERROR

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_FORMAT = "%(levelprefix)s %(asctime)s - %(name)s - %(message)s"
ACCESS_FORMAT = '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'


def _formatter(factory: str, fmt: str) -> dict[str, Any]:
    return {"()": factory, "fmt": fmt, "datefmt": DATE_FORMAT, "use_colors": True}


def build_log_config(level: int | str = LOG_LEVEL) -> dict[str, Any]:
    """dictConfig for the client, its HTTP stack and the demo service.

    httpx/httpcore stay at WARNING so request-level chatter does not drown the
    client's own DEBUG lines.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": _formatter("uvicorn.logging.DefaultFormatter", DEFAULT_FORMAT),
            "access": _formatter("uvicorn.logging.AccessFormatter", ACCESS_FORMAT),
        },
        "handlers": {
            "default": {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stderr"},
            "access": {"class": "logging.StreamHandler", "formatter": "access", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["default"], "level": level, "propagate": False},
            "httpx": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "httpcore": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
        },
    }


config.dictConfig(build_log_config())

logger = getLogger(LOGGER_NAME)
