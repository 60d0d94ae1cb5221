"""
Base handler class providing common functionality for all commands.
"""

from abc import ABC, abstractmethod

from ..cli.help_system import DEFAULT_PROGRAM_NAME


class CommandFactoryError(Exception):
    """Raised by a command factory that cannot build its command."""


class BaseHandler(ABC):
    """Abstract base class for commands created by registry factories."""

    def __init__(self, ui, configuration_manager=None):
        """
        Initialize the handler with common dependencies.

        Args:
            ui: Output sink
            configuration_manager: Loaded configuration, may be None
        """
        self.ui = ui
        self.configuration_manager = configuration_manager

    @abstractmethod
    def run(self, args):
        """
        Run the command.

        Args:
            args (list): Tokens that followed the subcommand name

        Returns:
            int: Process exit code
        """

    def synopsis(self):
        """One-line description of the command."""
        return ""

    def help(self):
        """Long-form help text of the command."""
        return ""

    def _program_name(self):
        if self.configuration_manager is None:
            return DEFAULT_PROGRAM_NAME
        return self.configuration_manager.get_program_name()
