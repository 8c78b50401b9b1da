"""Command line interface for the almanac."""

import logging
import sys

from almanac.config import CalendarConfig

LOG_FORMAT_FILE = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_CONSOLE = "%(levelname)s: %(message)s"

# Third-party loggers kept at WARNING on every handler
NOISY_LOGGERS = ("aiohttp", "asyncio", "werkzeug")


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: CalendarConfig | None = None
) -> None:
    """Log everything to the almanac log file and warnings up to stderr.

    Args:
        verbose: Also show info messages on stderr
        quiet: Only show errors on stderr (wins over verbose)
        config: Supplies log_dir and log_filename (read from env if omitted)
    """
    config = config or CalendarConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(
        config.log_dir / config.log_filename, encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE))
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT_CONSOLE))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # Replace handlers from an earlier invocation in the same process
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def main() -> None:
    """Entry point of the ``almanac`` script."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
