import logging

from object_fabricator.config import get_settings


def get_logger() -> logging.Logger:
    return logging.getLogger(get_settings().logger_name)
