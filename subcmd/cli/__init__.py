"""
CLI package for subcmd - help text components.
"""

from .help_system import (
    DEFAULT_PROGRAM_NAME,
    DEFAULT_USAGE,
    build_help_lines,
    format_usage
)

__all__ = [
    'DEFAULT_PROGRAM_NAME',
    'DEFAULT_USAGE',
    'build_help_lines',
    'format_usage'
]
