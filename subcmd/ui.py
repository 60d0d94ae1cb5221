"""
Output sinks for subcmd.

Everything the dispatcher and the built-in commands write to the user goes
through a Ui instance, so tests can swap the Rich console for an in-memory
collector.
"""

from abc import ABC, abstractmethod
import sys

from rich.console import Console
from rich.text import Text


class Ui(ABC):
    """Abstract output sink."""

    @abstractmethod
    def error(self, message):
        """Write an error or usage line."""

    @abstractmethod
    def output(self, message):
        """Write a line of regular command output."""

    @abstractmethod
    def info(self, message):
        """Write an informational line."""


class ConsoleUi(Ui):
    """Rich-backed sink: output goes to stdout, errors and info to stderr."""

    def __init__(self, stdout_console=None, stderr_console=None, no_color=False):
        """
        Args:
            stdout_console: Rich console for regular output (created if None)
            stderr_console: Rich console for errors and info (created if None)
            no_color (bool): Disable colour on the consoles created here
        """
        self.stdout_console = stdout_console or Console(file=sys.stdout, no_color=no_color, highlight=False)
        self.stderr_console = stderr_console or Console(stderr=True, no_color=no_color, highlight=False)

    def error(self, message):
        # Text keeps "[--help]" and friends from being read as markup
        self.stderr_console.print(Text(message, style="bold red"))

    def output(self, message):
        self.stdout_console.print(Text(message))

    def info(self, message):
        self.stderr_console.print(Text(message, style="cyan"))


class MemoryUi(Ui):
    """Sink that keeps every line in memory, used by the test-suite."""

    def __init__(self):
        self.errors = []
        self.outputs = []
        self.infos = []

    def error(self, message):
        self.errors.append(message)

    def output(self, message):
        self.outputs.append(message)

    def info(self, message):
        self.infos.append(message)
