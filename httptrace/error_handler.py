"""Error handling utilities for the httptrace application.

This module provides centralized error handling so the CLI reports
failures the same way everywhere.
"""

import sys

from httptrace.exceptions import HttptraceError
from httptrace.log import logger


def handle_error(error: Exception, exit_on_error: bool = False) -> None:
    """Handle an error by logging it and optionally exiting.

    httptrace errors are logged as their message, followed by the fix
    suggestion on its own line when one is attached.

    Args:
        error: The exception that was raised
        exit_on_error: If True, exit the program after logging the error
    """

    if isinstance(error, HttptraceError):
        logger.error(error.message)
        if error.suggestion:
            logger.info(f"Suggestion: {error.suggestion}")
    else:
        logger.error(f"Unexpected error: {error}")
        logger.debug("Stack trace:", exc_info=True)

    if exit_on_error:
        sys.exit(1)
