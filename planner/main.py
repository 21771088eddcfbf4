"""Composition root for the Planner event core.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. The command layer that turns user
input into calls on the core receives a wired Application from here.
"""

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from planner.adapters.display.stdout import StdoutEventDisplay
from planner.config import Settings, load_settings
from planner.core.event_list import EventList
from planner.core.ports import EventDisplayPort


@dataclass
class Application:
    """Wired core objects handed to the command layer."""

    settings: Settings
    events: EventList
    display: EventDisplayPort


LOGGER_NAME = "planner"

LOG_FORMATS = {
    "json": '{"time": "%(asctime)s", "logger": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}',
    "text": "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
}


def configure_logging(
    log_level: str, log_format: str, stream: TextIO | None = None
) -> logging.Logger:
    """Attach a single handler to the ``planner`` package logger.

    Output goes to stderr by default so it never interleaves with event
    listings printed by the stdout display adapter. Calling this again
    replaces the previous handler rather than stacking another one.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
        stream: Destination stream; defaults to sys.stderr.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMATS.get(log_format, LOG_FORMATS["text"])))
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level, logging.INFO))
    package_logger.propagate = False
    return package_logger


def bootstrap(settings: Settings | None = None) -> Application:
    """Load configuration, configure logging and wire the core.

    Args:
        settings: Pre-built settings. Loaded from the environment if omitted.

    Returns:
        Application holding an empty EventList and the display adapter.
    """
    if settings is None:
        settings = load_settings()

    log_level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    display = StdoutEventDisplay(verbose=settings.display_verbose)
    logger.info("Display adapter: stdout")

    app = Application(settings=settings, events=EventList(), display=display)
    logger.info("Planner core ready")
    return app


def main() -> None:
    """Wiring smoke check: bootstrap the core and show its event list.

    No storage is attached, so the list is always empty and nothing is
    printed. The command layer drives a real session through bootstrap().
    """
    app = bootstrap()
    app.events.show(app.display)


if __name__ == "__main__":
    main()
