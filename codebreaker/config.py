"""
Single place to:
- Read settings from the environment (and a local .env if present)
- Set up logging for the whole package

Game constants (pegs, colors, tries) are fixed and live in types.py.
"""

import logging
import os

from dotenv import load_dotenv

# dev convenience; in prod the platform injects env vars
load_dotenv()

APP_ENV = os.getenv("APP_ENV", "local")

# "local" draws secrets in-process, "random_org" asks random.org first
SECRET_SOURCE = os.getenv("SECRET_SOURCE", "local")
RANDOM_ORG_TIMEOUT = float(os.getenv("RANDOM_ORG_TIMEOUT", "3.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach one console handler to the package logger. Safe to call twice."""
    logger = logging.getLogger("codebreaker")
    logger.setLevel(level.upper())

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)

    return logger
