"""
Help command handler.

Shows the general usage text, or the help of a single command when a topic
is given.
"""

import logging

from ..cli.help_system import build_help_lines, format_usage
from .base_handler import BaseHandler, CommandFactoryError

logger = logging.getLogger(__name__)


class HelpHandler(BaseHandler):

    def __init__(self, ui, configuration_manager=None, commands=None):
        """
        Args:
            ui: Output sink
            configuration_manager: Loaded configuration, may be None
            commands (dict): Registry the help text describes
        """
        super().__init__(ui, configuration_manager)
        self.commands = commands if commands is not None else {}

    def run(self, args):
        if not args:
            for line in build_help_lines(self._usage(), self.commands.keys()):
                self.ui.output(line)
            return 0

        topic = args[0]
        factory = self.commands.get(topic)
        if factory is None:
            self.ui.error(f"Unknown help topic: {topic}")
            return 1

        try:
            command = factory()
        except CommandFactoryError as e:
            logger.error(f"Unable to create command {topic!r}: {e}")
            self.ui.error(f"Error instantiating command '{topic}': {e}")
            return 1

        self.ui.output(command.help() or command.synopsis())
        return 0

    def synopsis(self):
        return "Show help for subcmd or one of its commands"

    def help(self):
        return f"usage: {self._program_name()} help [<command>]"

    def _usage(self):
        if self.configuration_manager is None:
            return format_usage(None, self._program_name())
        return self.configuration_manager.get_usage()
