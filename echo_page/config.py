# -*- coding: utf-8 -*-

import logging
import os
import sys

DEFAULT_TITLE = "Test page"
DEFAULT_BRAND = "Agile for GitHub"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings:
    """Per-process settings, read from the CGI environment."""

    def __init__(self, title=DEFAULT_TITLE, brand=DEFAULT_BRAND, log_level=DEFAULT_LOG_LEVEL):
        self.title = title
        self.brand = brand
        self.log_level = log_level

    @classmethod
    def from_environ(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            title=env.get("ECHO_PAGE_TITLE", DEFAULT_TITLE),
            brand=env.get("ECHO_PAGE_BRAND", DEFAULT_BRAND),
            log_level=env.get("ECHO_PAGE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    def __repr__(self):
        return f"Settings(title={self.title!r}, brand={self.brand!r}, log_level={self.log_level!r})"


def log_level_number(name: str) -> int:
    level = logging.getLevelName((name or "").strip().upper())
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else logging.WARNING


_handler = None


def configure_logging(level=DEFAULT_LOG_LEVEL):
    """
    Send package logs to stderr; stdout carries the CGI response.

    Calling it again only updates the level.
    """
    global _handler

    logger = logging.getLogger("echo_page")
    logger.setLevel(log_level_number(level))

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    logger.propagate = False

    return logger
