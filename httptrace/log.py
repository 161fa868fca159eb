"""Logging configuration for the httptrace application.

This module provides centralized logging setup and configuration
for consistent log output across the application with colored output.
"""

import logging

from colorama import Fore, Style, init

from httptrace.config import Config

# Initialize colorama for cross-platform colored output
init(autoreset=True)

logger = logging.getLogger("httptrace")


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of each record."""

    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.BLUE,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record):
        original_format = super().format(record)
        color = self.COLORS.get(record.levelno, "")
        if not color:
            return original_format

        # time, name, level, message
        parts = original_format.split(" - ", 3)
        if len(parts) >= 3:
            parts[2] = f"{color}{parts[2]}{Style.RESET_ALL}"
            return " - ".join(parts)
        return original_format


def init_logger(config: Config):
    """Initialize the logger with colored output."""
    log_level = config.log_level
    logger.setLevel(log_level)

    # Clear any existing handlers to avoid duplicates
    logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(
        ColoredFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(stream_handler)

    logger.propagate = False
