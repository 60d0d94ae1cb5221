#!/usr/bin/env python3
"""
Command-line entry point for subcmd.

Loads the configuration, sets up logging, lets the Dispatcher pick the
subcommand and then builds and runs it.
"""

import logging
import os
import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .configuration_manager import ConfigurationError, ConfigurationManager
from .dispatcher import Dispatcher
from .handlers import CommandFactoryError, default_commands
from .logging_setup import setup_logging
from .ui import ConsoleUi

logger = logging.getLogger(__name__)

CONFIG_ENV = 'SUBCMD_CONFIG'


def initialize_configuration():
    """Initialize configuration manager, honouring SUBCMD_CONFIG."""
    config_file = os.environ.get(CONFIG_ENV)
    if not config_file:
        script_directory = os.path.dirname(os.path.abspath(__file__))
        config_file = os.path.join(script_directory, 'subcmd.yml')
    return ConfigurationManager(config_file)


def execute_command(dispatcher, commands, ui):
    """
    Build the resolved command through its factory and run it.

    Args:
        dispatcher: Dispatcher whose run() returned 0
        commands (dict): Registry the dispatcher resolved against
        ui: Output sink

    Returns:
        int: Exit code of the command, or 1 if it could not be created
    """
    name = dispatcher.resolved_subcommand()
    try:
        command = commands[name]()
    except CommandFactoryError as e:
        logger.error(f"Unable to create command {name!r}: {e}")
        ui.error(f"Error instantiating command '{name}': {e}")
        return 1

    logger.debug(f"Running {name!r} with {dispatcher.subcommand_args()!r}")
    return command.run(dispatcher.subcommand_args())


def main(argv=None):
    """Main entry point for subcmd."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        config_manager = initialize_configuration()
    except ConfigurationError as e:
        Console(stderr=True).print(Panel.fit(Text(str(e)), title="Configuration Error"))
        return 1

    setup_logging(config_manager.get_log_level())

    ui = ConsoleUi(no_color=not config_manager.get_color_enabled())
    commands = default_commands(ui, config_manager)
    dispatcher = Dispatcher(
        argv, commands, ui,
        usage=config_manager.get_usage_template(),
        program_name=config_manager.get_program_name()
    )

    exit_code = dispatcher.run()
    if exit_code != 0:
        return exit_code

    return execute_command(dispatcher, commands, ui)


if __name__ == "__main__":
    sys.exit(main())
