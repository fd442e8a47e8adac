"""
Logging setup for the service process.

Typical use (entry point / startup):
    configure_logging(settings.logging.default_level)

Modules just log through logging.getLogger(__name__).
"""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install one root handler at the given level (replaces any previous one)."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
