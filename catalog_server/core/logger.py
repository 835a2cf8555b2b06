# catalog_server/core/logger.py

import logging
from logging.config import dictConfig

from catalog_server.core.config import DEBUG


LOGGER_NAME = "movie_catalog"


def build_logging_config(level: str) -> dict:
    # Reuses uvicorn's formatter so catalog lines look like the access log.
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "catalog": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s [%(name)s] %(asctime)s %(message)s",
                "datefmt": "%H:%M:%S",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "catalog",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["stderr"], "level": level, "propagate": False},
        },
    }


dictConfig(build_logging_config("DEBUG" if DEBUG else "INFO"))
logger = logging.getLogger(LOGGER_NAME)
