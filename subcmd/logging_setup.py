"""
Logging setup for subcmd.

Log records go to stderr through Rich so they never mix with command output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme


def setup_logging(level: str = 'WARNING', console: Console = None) -> logging.Handler:
    """
    Install a RichHandler on the root logger.

    Args:
        level: Logging level name
        console: Console to log to (a stderr console is created if None)

    Returns:
        The installed handler
    """
    if console is None:
        console = Console(
            stderr=True,
            theme=Theme({
                "info": "cyan",
                "warning": "yellow",
                "error": "bold red"
            }),
            highlight=False
        )

    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        show_time=True,
        show_path=False,
        markup=False,  # Arguments may contain square brackets
        log_time_format="[%H:%M:%S]",
        keywords=[]
    )
    handler.setFormatter(logging.Formatter('%(name)s: %(message)s'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        handlers=[handler],
        force=True
    )
    return handler
