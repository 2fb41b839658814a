# -*- coding: utf-8 -*-
"""Location: ./ssui_e2e/logging_config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Logging setup for suite components.

pytest owns the root handlers (``log_cli`` in pyproject.toml); this only sets
the level of the suite's own loggers and adds a stderr handler when nothing
else is configured, e.g. when page objects are driven from a REPL.
"""

# Standard
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SUITE_LOGGERS = ("ssui_e2e", "tests.playwright")


def configure_logging(level: str = "INFO") -> None:
    """Apply a logging level to the suite loggers.

    Args:
        level: Level name such as ``DEBUG`` or ``INFO``.

    Examples:
        >>> configure_logging("DEBUG")
        >>> logging.getLogger("ssui_e2e").level == logging.DEBUG
        True
    """
    numeric_level = getattr(logging, level.upper())
    for name in SUITE_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)
