"""
Unit tests for the built-in command handlers and the default registry.
"""

from unittest.mock import Mock

import pytest

from subcmd.handlers import (
    BaseHandler,
    CommandFactoryError,
    HelpHandler,
    VersionHandler,
    default_commands
)
from subcmd.version import VERSION


@pytest.fixture
def config_manager():
    manager = Mock()
    manager.get_program_name.return_value = 'serf'
    manager.get_usage.return_value = 'usage: serf <command>'
    return manager


class TestDefaultCommands:

    def test_registered_names(self, memory_ui):
        assert sorted(default_commands(memory_ui)) == ['help', 'version']

    def test_factories_build_fresh_commands(self, memory_ui):
        commands = default_commands(memory_ui)

        first = commands['version']()
        second = commands['version']()

        assert isinstance(first, VersionHandler)
        assert first is not second

    def test_help_sees_whole_registry(self, memory_ui):
        commands = default_commands(memory_ui)
        commands['extra'] = Mock()

        help_command = commands['help']()

        assert isinstance(help_command, HelpHandler)
        assert 'extra' in help_command.commands


class TestVersionHandler:

    def test_run(self, memory_ui, config_manager):
        exit_code = VersionHandler(memory_ui, config_manager).run([])

        assert exit_code == 0
        assert memory_ui.outputs[0].startswith(f"serf v{VERSION}")

    def test_default_program_name(self, memory_ui):
        VersionHandler(memory_ui).run([])

        assert memory_ui.outputs[0].startswith("subcmd v")

    def test_synopsis(self, memory_ui):
        assert VersionHandler(memory_ui).synopsis()


class TestHelpHandler:

    def test_general_help(self, memory_ui, config_manager):
        commands = {'version': Mock(), 'help': Mock()}

        exit_code = HelpHandler(memory_ui, config_manager, commands).run([])

        assert exit_code == 0
        assert memory_ui.outputs == [
            "usage: serf <command>\n",
            "Available commands are:",
            "    help",
            "    version",
        ]

    def test_topic_help(self, memory_ui):
        commands = default_commands(memory_ui)

        exit_code = commands['help']().run(['version'])

        assert exit_code == 0
        assert memory_ui.outputs == [VersionHandler(memory_ui).help()]

    def test_topic_falls_back_to_synopsis(self, memory_ui):
        command = Mock()
        command.help.return_value = ""
        command.synopsis.return_value = "Bring the cluster up"

        HelpHandler(memory_ui, commands={'up': lambda: command}).run(['up'])

        assert memory_ui.outputs == ["Bring the cluster up"]

    def test_unknown_topic(self, memory_ui):
        exit_code = HelpHandler(memory_ui, commands={}).run(['down'])

        assert exit_code == 1
        assert memory_ui.errors == ["Unknown help topic: down"]

    def test_topic_factory_failure(self, memory_ui):
        factory = Mock(side_effect=CommandFactoryError("no agent"))

        exit_code = HelpHandler(memory_ui, commands={'up': factory}).run(['up'])

        assert exit_code == 1
        assert memory_ui.errors == ["Error instantiating command 'up': no agent"]


class TestBaseHandler:

    def test_is_abstract(self, memory_ui):
        with pytest.raises(TypeError):
            BaseHandler(memory_ui)

    def test_defaults(self, memory_ui):
        class Noop(BaseHandler):
            def run(self, args):
                return 0

        command = Noop(memory_ui)

        assert command.synopsis() == ""
        assert command.help() == ""
