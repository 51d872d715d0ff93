"""Logging setup shared by the CLI and the web app."""

import logging

from rich.logging import RichHandler

_LOGGING_CONFIGURED = False


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    parsed_level = getattr(logging, level.upper(), None)
    if not isinstance(parsed_level, int):
        parsed_level = logging.WARNING

    logging.basicConfig(
        level=parsed_level,
        format="%(name)s | %(message)s",
        handlers=[RichHandler(show_path=False, markup=False)],
    )
    _LOGGING_CONFIGURED = True
