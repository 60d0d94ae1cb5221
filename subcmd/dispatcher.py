"""
Subcommand dispatcher.

Classifies the raw argument tokens once, then decides whether the resolved
subcommand can be run or whether usage has to be shown instead.
"""

import logging
import threading

from .cli.help_system import build_help_lines, format_usage

logger = logging.getLogger(__name__)

HELP_FLAGS = ('-h', '--help')


class Dispatcher:

    def __init__(self, args, commands, ui, usage=None, program_name=None):
        """
        Args:
            args: Argument tokens, without the program name
            commands (dict): Subcommand name -> zero-argument factory
            ui: Output sink used for the help text
            usage (str): Usage template, may contain "{program}"
            program_name (str): Program name substituted into the usage
        """
        self.args = tuple(args)
        self.commands = commands
        self.ui = ui
        self.usage = format_usage(usage, program_name)

        self._lock = threading.Lock()
        self._processed = False
        self._is_help = False
        self._subcommand = ''
        self._subcommand_index = None

    def help_requested(self):
        """Return True if -h or --help appears anywhere in the arguments."""
        self._ensure_processed()
        return self._is_help

    def resolved_subcommand(self):
        """
        Return the subcommand that would be executed, or "" if none.

        For "--version version --help" this is "version".
        """
        self._ensure_processed()
        return self._subcommand

    def subcommand_args(self):
        """Return the tokens following the subcommand, unexamined."""
        self._ensure_processed()
        if self._subcommand == '':
            return []
        return list(self.args[self._subcommand_index + 1:])

    def run(self):
        """
        Decide whether the resolved subcommand can run.

        The factory is never called here; the caller does that once this
        returns 0.

        Returns:
            int: 0 if a registered subcommand was resolved, 1 if help was shown
        """
        if self.help_requested():
            logger.debug("Help flag present, showing usage")
            self.print_help()
            return 1

        subcommand = self.resolved_subcommand()
        if subcommand == '' or subcommand not in self.commands:
            logger.debug(f"No registered command for {subcommand!r}, showing usage")
            self.print_help()
            return 1

        logger.debug(f"Resolved command {subcommand!r}")
        return 0

    def print_help(self):
        for line in build_help_lines(self.usage, self.commands.keys()):
            self.ui.error(line)

    def _ensure_processed(self):
        if self._processed:
            return
        with self._lock:
            if not self._processed:
                self._process_args()
                self._processed = True

    def _process_args(self):
        for index, arg in enumerate(self.args):
            # Help flags are recorded but never become the subcommand
            if arg in HELP_FLAGS:
                self._is_help = True
                continue

            # First non-flag token wins. An empty token leaves the slot open.
            if self._subcommand == '' and not arg.startswith('-'):
                self._subcommand = arg
                self._subcommand_index = index

        logger.debug(f"Classified arguments: help={self._is_help} subcommand={self._subcommand!r}")
