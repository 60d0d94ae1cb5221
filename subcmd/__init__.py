"""
subcmd - resolve and dispatch subcommands from raw command-line arguments.
"""

from .dispatcher import HELP_FLAGS, Dispatcher
from .handlers import BaseHandler, CommandFactoryError, default_commands
from .ui import ConsoleUi, MemoryUi, Ui
from .version import VERSION

__version__ = VERSION

__all__ = [
    'HELP_FLAGS',
    'Dispatcher',
    'BaseHandler',
    'CommandFactoryError',
    'default_commands',
    'ConsoleUi',
    'MemoryUi',
    'Ui',
    'VERSION'
]
