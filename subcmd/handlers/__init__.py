"""
Command handlers for subcmd and the default command registry.
"""

from .base_handler import BaseHandler, CommandFactoryError
from .help_handler import HelpHandler
from .version_handler import VersionHandler


def default_commands(ui, configuration_manager=None):
    """
    Build the registry of built-in commands.

    Args:
        ui: Output sink handed to every command
        configuration_manager: Loaded configuration, may be None

    Returns:
        dict: Command name -> zero-argument factory
    """
    commands = {}
    commands['version'] = lambda: VersionHandler(ui, configuration_manager)
    commands['help'] = lambda: HelpHandler(ui, configuration_manager, commands)
    return commands


__all__ = [
    'BaseHandler',
    'CommandFactoryError',
    'HelpHandler',
    'VersionHandler',
    'default_commands'
]
