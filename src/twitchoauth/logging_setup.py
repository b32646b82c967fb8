# Rich console logging for the twitchoauth CLI.
# Created: 2026-10-18

import logging

from rich.logging import RichHandler


def setup_logging(level: str = "INFO") -> None:
    """Route all log records through a single Rich handler on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx logs every request URL at INFO, query string included.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
