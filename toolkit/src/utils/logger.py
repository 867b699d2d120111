"""Global logging, alert and error handling utilities"""
import logging
import sys
import traceback
from typing import Callable, Optional

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_alert_handler: Optional[Callable[[str, str], None]] = None

_logger = logging.getLogger('Toolkit')


def configure_logging(verbose: bool = False):
    """Console logging for scripts driving the toolkit

    WARNING level by default, DEBUG when verbose.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def set_alert_handler(handler: Optional[Callable[[str, str], None]]):
    """Set the callable that shows user-visible alerts: handler(title, message)"""
    global _alert_handler
    _alert_handler = handler


def alert(message: str, title: str = "Warning"):
    """Non-fatal user-visible warning

    Always logged; also forwarded to the alert handler when one is set.
    """
    _logger.warning(f"{title}: {message}")
    if _alert_handler:
        _alert_handler(title, message)


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional alert in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show (optional)
        title: Title for the alert

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows an alert with user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    tb = traceback.format_exc()
    _logger.error(f"ERROR: {tb}")

    message = user_message if user_message else str(e)
    if _alert_handler:
        _alert_handler(title, message)
    else:
        print(f"ERROR ALERT (no handler): {title} - {message}", file=sys.stderr)

    raise e
