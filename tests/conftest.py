"""
Pytest configuration and shared fixtures for subcmd tests.
"""

import logging
import os
import tempfile
from unittest.mock import Mock

import pytest
import yaml

from subcmd.dispatcher import Dispatcher
from subcmd.ui import MemoryUi


@pytest.fixture
def memory_ui():
    """In-memory output sink."""
    return MemoryUi()


@pytest.fixture
def up_factory():
    """Mock factory registered under "up"."""
    return Mock(name='up_factory')


@pytest.fixture
def commands(up_factory):
    """Registry with a single "up" command."""
    return {'up': up_factory}


@pytest.fixture
def make_dispatcher(commands, memory_ui):
    """Build a Dispatcher over the given arguments with the shared registry and sink."""
    def _make(args):
        return Dispatcher(args, commands, memory_ui, program_name='serf')
    return _make


@pytest.fixture
def write_config(monkeypatch):
    """Write a YAML config to a temporary file and point SUBCMD_CONFIG at it."""
    paths = []

    def _write(data, raw=None):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yml', delete=False) as f:
            if raw is not None:
                f.write(raw)
            else:
                yaml.dump(data, f)
        paths.append(f.name)
        monkeypatch.setenv('SUBCMD_CONFIG', f.name)
        return f.name

    yield _write

    # Cleanup
    for path in paths:
        os.unlink(path)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's environment from leaking into configuration lookups."""
    monkeypatch.delenv('SUBCMD_CONFIG', raising=False)
    monkeypatch.delenv('SUBCMD_LOG_LEVEL', raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the root logger changes setup_logging makes when main() runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
