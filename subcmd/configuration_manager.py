import logging
import os

import yaml

from .cli.help_system import DEFAULT_PROGRAM_NAME, DEFAULT_USAGE, format_usage

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVEL_ENV = 'SUBCMD_LOG_LEVEL'
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
STRING_SETTINGS = ('program_name', 'usage')


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be read or parsed."""


class ConfigurationManager:
    def __init__(self, config_file_path):
        self.config_file_path = config_file_path
        self.config = self._read_yaml_file()
        self.default_settings = self.config.get('settings') or {}

    def _read_yaml_file(self):
        """
        Read and parse the YAML configuration file.

        A missing file yields an empty configuration.

        Returns:
            dict: The parsed YAML configuration

        Raises:
            ConfigurationError: If the file is unreadable, is not valid YAML,
                or does not contain a mapping
        """
        if not os.path.exists(self.config_file_path):
            logger.debug(f"No configuration file at {self.config_file_path}, using defaults")
            return {}

        try:
            with open(self.config_file_path, 'r') as file:
                data = yaml.safe_load(file)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Unable to load {self.config_file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.config_file_path} must contain a mapping at the top level")
        if not isinstance(data.get('settings') or {}, dict):
            raise ConfigurationError(f"'settings' in {self.config_file_path} must be a mapping")
        for key in STRING_SETTINGS:
            value = (data.get('settings') or {}).get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"'{key}' in {self.config_file_path} must be a string")
        return data

    def get_program_name(self):
        """
        Get the program name shown in the usage banner.

        Returns:
            str: Program name (defaults to "subcmd")
        """
        program_name = self.default_settings.get('program_name')
        return DEFAULT_PROGRAM_NAME if program_name is None else program_name

    def get_usage(self):
        """
        Get the usage banner with the program name filled in.

        Returns:
            str: Usage banner
        """
        return format_usage(self.get_usage_template(), self.get_program_name())

    def get_usage_template(self):
        """Get the usage template before the program name is substituted."""
        usage = self.default_settings.get('usage')
        return DEFAULT_USAGE if usage is None else usage

    def get_log_level(self):
        """
        Get the log level, checking the environment variable first.

        Unknown level names fall back to WARNING.

        Returns:
            str: Upper-case logging level name
        """
        level = os.environ.get(LOG_LEVEL_ENV) or self.default_settings.get('log_level', DEFAULT_LOG_LEVEL)
        level = str(level).upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return level

    def get_color_enabled(self):
        """
        Get whether coloured output is enabled.

        Returns:
            bool: True unless disabled in the configuration
        """
        return bool(self.default_settings.get('color', True))
